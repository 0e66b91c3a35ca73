"""
Activity log entity model.

An append-only audit trail of user actions (stock movements, staff changes,
order updates).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class ActivityLog(Base, table=True):
    """Entity for an activity log record.

    Table: activity_logs
    """

    __tablename__ = "activity_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    action: str = Field(max_length=64, index=True)
    details: str = Field(default="", sa_type=Text)
    timestamp: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
