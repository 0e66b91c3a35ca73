"""
Backup entity models.

``Backup`` records every backup file written to the backup directory.
``BackupSettings`` is a single-row table (``id == 1``) holding the automatic
backup schedule.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field

from ..base import Base, utc_now


class Backup(Base, table=True):
    """Entity for a backup file record.

    Table: backups
    """

    __tablename__ = "backups"

    id: Optional[int] = Field(default=None, primary_key=True)
    filename: str = Field(max_length=255)
    size: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
    type: str = Field(default="manual", max_length=16)
    status: str = Field(default="completed", max_length=16)
    created_by: Optional[str] = Field(default=None, max_length=255)


class BackupSettings(Base, table=True):
    """Entity for the automatic backup schedule.

    Table: backup_settings
    """

    __tablename__ = "backup_settings"

    id: int = Field(default=1, primary_key=True)
    frequency: str = Field(default="daily", max_length=16)
    last_backup: Optional[datetime] = Field(default=None, sa_type=DateTime)
    next_backup: Optional[datetime] = Field(default=None, sa_type=DateTime)
    enabled: bool = Field(default=False)
