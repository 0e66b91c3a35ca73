"""
Database backups.

Backups are online copies of the SQLite database written through SQLite's
backup API, so the server keeps serving requests while a copy is taken.
Each file is recorded in the ``backups`` table. Automatic backups follow the
schedule in ``backup_settings`` and only the newest ``keep_count`` automatic
backups are kept; manual backups are never pruned.
"""

from __future__ import annotations

import asyncio
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

import aiosqlite
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.backups import Backup, BackupSettings
from loungeos.core.database.repositories.backups import BackupRepository, BackupSettingsRepository
from loungeos.core.errors import ConflictError, InvalidOperationError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import BackupFrequency, BackupType, next_backup_time
from loungeos.core.models.io.backups import BackupSettingsUpdate, SystemStats
from loungeos.core.monitoring import log_backup
from loungeos.server.core.config import settings

logger = get_logger(__name__)


def backup_filename(moment: datetime) -> str:
    stamp = moment.isoformat(timespec="milliseconds").replace(":", "-").replace(".", "-")
    return f"loungeos_backup_{stamp}.db"


def database_path(url: str) -> str:
    """Extract the SQLite file path from a database URL."""
    return make_url(url).database or ":memory:"


async def copy_database(source: str, target: Path) -> int:
    """Copy a live SQLite database into ``target`` and return the file size in bytes."""
    target.parent.mkdir(parents=True, exist_ok=True)
    async with aiosqlite.connect(source) as src, aiosqlite.connect(str(target)) as dst:
        await src.backup(dst)
    return target.stat().st_size


class BackupService:
    """Service for manual and automatic database backups."""

    def __init__(
        self,
        session: AsyncSession,
        source_path: Optional[str] = None,
        directory: Optional[str] = None,
        keep_count: Optional[int] = None,
    ):
        config = settings.backup
        self.session = session
        self.source_path = source_path or database_path(settings.database_url)
        self.directory = Path(directory or config.directory)
        self.keep_count = keep_count if keep_count is not None else config.keep_count
        self.backups = BackupRepository(session)
        self.schedule = BackupSettingsRepository(session)

    async def create_backup(
        self, backup_type: BackupType = BackupType.manual, created_by: Optional[str] = None
    ) -> Backup:
        """
        Write a backup file and record it.

        Args:
            backup_type: manual or automatic
            created_by: Name of the requesting user

        Returns:
            The recorded backup

        Raises:
            ConflictError: If a backup with the same timestamped name exists
        """
        now = utc_now()
        filename = backup_filename(now)
        target = self.directory / filename
        if target.exists():
            raise ConflictError(f"Backup {filename} already exists")
        size = await copy_database(self.source_path, target)
        backup = await self.backups.create(
            Backup(filename=filename, size=size, created_at=now, type=backup_type.value, created_by=created_by)
        )
        logger.info(f"Created {backup_type.value} backup {filename} ({size} bytes)")
        log_backup(filename, size, backup_type.value)
        return backup

    async def history(self, limit: int = 10) -> List[Backup]:
        return await self.backups.recent(limit)

    async def delete_backup(self, backup_id: int) -> None:
        """Delete a backup record and its file."""
        backup = await self.backups.get_or_raise(backup_id)
        path = self.directory / backup.filename
        if path.exists():
            path.unlink()
        else:
            logger.warning(f"Backup file {path} is missing; removing the record only")
        await self.backups.delete(backup_id)

    async def get_settings(self) -> BackupSettings:
        return await self.schedule.get_or_create()

    async def update_settings(self, data: BackupSettingsUpdate) -> BackupSettings:
        """Store the schedule and recompute the next backup time from now."""
        current = await self.schedule.get_or_create()
        current.frequency = data.frequency.value
        current.enabled = data.enabled and data.frequency is not BackupFrequency.disabled
        current.next_backup = next_backup_time(data.frequency, utc_now()) if current.enabled else None
        return await self.schedule.update(current)

    async def _prune(self) -> int:
        automatic = await self.backups.list_by_type(BackupType.automatic.value)
        stale = automatic[self.keep_count :]
        for backup in stale:
            path = self.directory / backup.filename
            if path.exists():
                path.unlink()
            await self.backups.remove(backup)
        await self.session.commit()
        return len(stale)

    async def run_automatic(self) -> Backup:
        """
        Take an automatic backup and advance the schedule.

        Raises:
            InvalidOperationError: If automatic backups are disabled
        """
        current = await self.schedule.get_or_create()
        if not current.enabled:
            raise InvalidOperationError("Automatic backups are disabled")

        backup = await self.create_backup(BackupType.automatic, created_by="system")
        current.last_backup = backup.created_at
        current.next_backup = next_backup_time(current.frequency, backup.created_at)
        await self.schedule.update(current)

        pruned = await self._prune()
        if pruned:
            logger.info(f"Pruned {pruned} old automatic backups")
        return backup

    def system_stats(self) -> SystemStats:
        """
        Report the database file size and the usage of the volume it lives on.

        An in-memory or not yet created database reports a size of 0 and the
        volume of the working directory.
        """
        source = Path(self.source_path)
        on_disk = self.source_path != ":memory:" and source.is_file()
        usage = shutil.disk_usage(source.resolve().parent if on_disk else Path.cwd())
        return SystemStats(
            db_size=source.stat().st_size if on_disk else 0,
            server_used_storage=usage.used,
            server_total_storage=usage.total,
        )

    async def is_due(self, now: Optional[datetime] = None) -> bool:
        current = await self.schedule.get_or_create()
        if not current.enabled:
            return False
        return current.next_backup is None or (now or utc_now()) >= current.next_backup


class BackupScheduler:
    """
    Background task running automatic backups when they fall due.

    The task polls every ``poll_interval`` seconds with a fresh session from
    ``session_factory``. A failing run is logged and retried on the next poll.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], poll_interval: Optional[float] = None):
        self.session_factory = session_factory
        self.poll_interval = poll_interval if poll_interval is not None else settings.backup.poll_interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> Optional[Backup]:
        async with self.session_factory() as session:
            service = BackupService(session)
            if not await service.is_due():
                return None
            return await service.run_automatic()

    async def _loop(self) -> None:
        while True:
            try:
                backup = await self.run_once()
                if backup is not None:
                    logger.info(f"Scheduled backup written: {backup.filename}")
            except Exception as e:
                logger.error(f"Scheduled backup failed: {e}", exc_info=True)
            await asyncio.sleep(self.poll_interval)

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="loungeos-backup-scheduler")
        logger.info(f"Backup scheduler started (every {self.poll_interval:.0f}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Backup scheduler stopped")
