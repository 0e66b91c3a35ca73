"""
Staff and authentication I/O models for API requests and responses.

Staff records never expose the stored password hash.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from loungeos.core.models.domain import StaffRole, StaffStatus
from loungeos.core.security import MAX_PASSWORD_BYTES, password_fits


def _check_password_bytes(value: str) -> str:
    if not password_fits(value):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class StaffRead(BaseModel):
    """Schema for reading a staff member from API."""

    id: int
    name: str
    email: str
    role: str = Field(description="Staff role (e.g., 'Waiter', 'Manager')")
    status: str = Field(description="Active or Away")
    avatar: Optional[str] = None
    floor: Optional[str] = Field(default=None, description="Floor the staff member is assigned to")
    phone: Optional[str] = None
    hire_date: Optional[datetime] = None
    force_password_change: bool = Field(description="Whether the next login must change the password")
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StaffCreate(BaseModel):
    """Schema for creating a staff member via API."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    role: StaffRole
    status: StaffStatus = StaffStatus.active
    avatar: Optional[str] = None
    floor: Optional[str] = None
    phone: Optional[str] = None
    hire_date: Optional[datetime] = None


class StaffUpdate(BaseModel):
    """Schema for updating a staff member via API."""

    name: Optional[str] = None
    role: Optional[StaffRole] = None
    status: Optional[StaffStatus] = None
    avatar: Optional[str] = None
    floor: Optional[str] = None
    phone: Optional[str] = None
    hire_date: Optional[datetime] = None


class StaffPerformance(BaseModel):
    """Order throughput and revenue of a single staff member."""

    id: int
    name: str
    role: str
    avatar: Optional[str] = None
    orders_processed: int
    completed_orders: int
    total_revenue: float
    average_order_value: float
    completion_rate: float = Field(description="Completed orders as a percentage of processed orders")


class LoginRequest(BaseModel):
    email: str
    password: str


class SetupRequest(BaseModel):
    """Schema for creating the first Super Admin account."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=6)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class PasswordResetRequest(BaseModel):
    email: str
    new_password: str = Field(min_length=6)

    @field_validator("new_password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class SetupStatus(BaseModel):
    is_setup: bool
