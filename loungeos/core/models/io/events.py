"""
Calendar event I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class EventRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    location: Optional[str] = None
    capacity: int
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EventCreate(BaseModel):
    """Schema for scheduling an event; the end may not precede the start."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    location: Optional[str] = None
    capacity: int = Field(default=0, ge=0)

    @field_validator("start_date", "end_date")
    @classmethod
    def store_as_naive_utc(cls, value: datetime) -> datetime:
        return as_naive_utc(value)


class EventUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=0)

    @field_validator("start_date", "end_date")
    @classmethod
    def store_as_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value)
