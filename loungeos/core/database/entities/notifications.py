"""
Notification entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class Notification(Base, table=True):
    """Entity for an in-app notification.

    Identifiers are strings prefixed with ``notif_``.

    Table: notifications
    """

    __tablename__ = "notifications"

    id: str = Field(primary_key=True, max_length=64)
    title: str = Field(max_length=255)
    description: str = Field(sa_type=Text)
    type: str = Field(default="info", max_length=32)
    is_read: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
