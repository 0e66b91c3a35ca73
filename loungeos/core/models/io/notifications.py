"""
Notification and activity log I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    id: str
    title: str
    description: str
    type: str
    is_read: bool
    created_at: datetime
    user_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class NotificationCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str
    type: str = Field(default="info", description="info, success, warning or error")
    user_id: Optional[int] = Field(default=None, description="Recipient; null broadcasts to everyone")


class ActivityLogRead(BaseModel):
    id: int
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    action: str
    details: str
    timestamp: datetime


class ActivityLogCreate(BaseModel):
    user_id: Optional[int] = None
    action: str = Field(min_length=1)
    details: str = ""
