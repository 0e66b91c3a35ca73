"""
Staff entity models.

This module contains the database entity for staff members. Staff members
sign in with their email, own orders as waiters and appear as actors in the
activity log.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field

from ..base import Base, utc_now


class StaffMember(Base, table=True):
    """Entity for a staff member account.

    Table: users
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    password: str = Field(max_length=255)
    role: str = Field(max_length=32, index=True)
    status: str = Field(default="Active", max_length=16)
    avatar: Optional[str] = Field(default=None, max_length=512)
    floor: Optional[str] = Field(default=None, max_length=128)
    phone: Optional[str] = Field(default=None, max_length=64)
    hire_date: Optional[datetime] = Field(default=None, sa_type=DateTime)
    force_password_change: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"StaffMember(id={self.id}, email={self.email}, role={self.role})"
