"""
Calendar event entity model.

Events are venue happenings (live music, private parties, tastings) shown on
the staff calendar.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class CalendarEvent(Base, table=True):
    """Entity for a calendar event.

    Table: events
    """

    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)
    start_date: datetime = Field(index=True, sa_type=DateTime)
    end_date: datetime = Field(sa_type=DateTime)
    location: Optional[str] = Field(default=None, max_length=255)
    capacity: int = Field(default=0)
    created_by: Optional[int] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"CalendarEvent(id={self.id}, title={self.title}, start={self.start_date})"
