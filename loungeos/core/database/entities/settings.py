"""
Application settings entity model.

Settings are stored as one row per key with a JSON-encoded value.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class AppSetting(Base, table=True):
    """Entity for a single settings key.

    Table: settings
    """

    __tablename__ = "settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(max_length=128, unique=True, index=True)
    value: str = Field(sa_type=Text)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
