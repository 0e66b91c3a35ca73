"""
Backup repositories.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.backups import Backup, BackupSettings
from .base import SQLModelRepository


class BackupRepository(SQLModelRepository[Backup]):
    """Repository for backup file records."""

    resource_name = "Backup"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Backup)

    def _default_order(self):
        return (Backup.created_at.desc(), Backup.id.desc())  # type: ignore

    async def recent(self, limit: int = 10) -> List[Backup]:
        return await self.list(limit=limit)

    async def list_by_type(self, backup_type: str) -> List[Backup]:
        """List backups of one type, newest first."""
        return await self.list(filters={"type": backup_type})


class BackupSettingsRepository(SQLModelRepository[BackupSettings]):
    """Repository for the single-row automatic backup schedule."""

    resource_name = "Backup settings"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BackupSettings)

    async def get_or_create(self) -> BackupSettings:
        current = await self.get_by_id(1)
        if current is None:
            current = await self.create(BackupSettings(id=1))
        return current
