"""
Backup I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from loungeos.core.models.domain import BackupFrequency


class BackupRead(BaseModel):
    id: int
    filename: str
    size: int = Field(description="File size in bytes")
    created_at: datetime
    type: str = Field(description="manual or automatic")
    status: str
    created_by: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class BackupSettingsRead(BaseModel):
    frequency: str
    enabled: bool
    last_backup: Optional[datetime] = None
    next_backup: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BackupSettingsUpdate(BaseModel):
    frequency: BackupFrequency
    enabled: bool


class BackupCreate(BaseModel):
    created_by: Optional[str] = Field(default=None, description="Name of the user requesting the backup")


class SystemStats(BaseModel):
    """Storage figures shown next to the backup history."""

    db_size: int = Field(description="Database file size in bytes; 0 when there is no file")
    server_used_storage: int = Field(description="Used bytes on the volume holding the database")
    server_total_storage: int = Field(description="Total bytes on the volume holding the database")
