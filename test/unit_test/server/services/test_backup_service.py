"""
Unit tests for the backup service and scheduler.

Backups are taken from a small SQLite file into a temporary directory; the
clock is replaced so that every backup gets a distinct timestamp.
"""

import asyncio
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import aiosqlite
import pytest
import pytest_asyncio

from loungeos.core.errors import ConflictError, InvalidOperationError
from loungeos.core.models.domain import BackupFrequency, BackupType
from loungeos.core.models.io.backups import BackupSettingsUpdate
from loungeos.server.services.backup import BackupScheduler, BackupService, backup_filename, database_path

pytestmark = pytest.mark.asyncio

START = datetime(2026, 3, 1, 8, 0, 0)


@pytest.fixture
def clock(monkeypatch):
    """Replace the service clock with one advancing a minute per call."""
    moments = (START + timedelta(minutes=i) for i in range(10_000))
    monkeypatch.setattr("loungeos.server.services.backup.utc_now", lambda: next(moments))


@pytest_asyncio.fixture
async def service(session, tmp_path: Path, clock) -> BackupService:
    source = tmp_path / "source.db"
    async with aiosqlite.connect(str(source)) as db:
        await db.execute("CREATE TABLE t (x INTEGER)")
        await db.commit()
    return BackupService(session, source_path=str(source), directory=str(tmp_path / "backups"), keep_count=2)


class TestHelpers:
    async def test_backup_filename(self):
        assert backup_filename(datetime(2026, 3, 1, 8, 5, 9, 123000)) == "loungeos_backup_2026-03-01T08-05-09-123.db"

    async def test_database_path(self):
        assert database_path("sqlite+aiosqlite:///data/pos.db") == "data/pos.db"
        assert database_path("sqlite+aiosqlite://") == ":memory:"


class TestBackupService:
    """Tests for BackupService."""

    async def test_manual_backups_are_never_pruned(self, service: BackupService):
        for _ in range(3):
            await service.create_backup(BackupType.manual)
        assert await service._prune() == 0
        assert len(await service.history()) == 3

    async def test_same_millisecond_backup_does_not_overwrite(self, service: BackupService, monkeypatch):
        monkeypatch.setattr("loungeos.server.services.backup.utc_now", lambda: START)
        first = await service.create_backup(BackupType.manual)

        with pytest.raises(ConflictError):
            await service.create_backup(BackupType.manual)

        assert [backup.filename for backup in await service.history()] == [first.filename]
        assert (service.directory / first.filename).stat().st_size == first.size

    async def test_run_automatic_requires_enabled_schedule(self, service: BackupService):
        with pytest.raises(InvalidOperationError):
            await service.run_automatic()

    async def test_run_automatic_prunes_oldest(self, service: BackupService):
        await service.update_settings(BackupSettingsUpdate(frequency=BackupFrequency.hourly, enabled=True))
        manual = await service.create_backup(BackupType.manual)

        created = [await service.run_automatic() for _ in range(4)]

        remaining = {backup.filename for backup in await service.history(limit=50)}
        assert remaining == {manual.filename, created[2].filename, created[3].filename}
        assert not (service.directory / created[0].filename).exists()
        assert (service.directory / created[3].filename).exists()

        schedule = await service.get_settings()
        assert schedule.last_backup == created[3].created_at
        assert schedule.next_backup == created[3].created_at + timedelta(hours=1)

    async def test_update_settings_disabled_frequency(self, service: BackupService):
        schedule = await service.update_settings(
            BackupSettingsUpdate(frequency=BackupFrequency.disabled, enabled=True)
        )
        assert schedule.enabled is False
        assert schedule.next_backup is None

    async def test_is_due(self, service: BackupService):
        assert await service.is_due() is False

        schedule = await service.update_settings(BackupSettingsUpdate(frequency=BackupFrequency.daily, enabled=True))
        assert await service.is_due(schedule.next_backup - timedelta(seconds=1)) is False
        assert await service.is_due(schedule.next_backup) is True


class TestBackupScheduler:
    """Tests for BackupScheduler."""

    async def test_run_once_skips_when_disabled(self, session_factory):
        scheduler = BackupScheduler(session_factory, poll_interval=60)
        assert await scheduler.run_once() is None

    async def test_run_once_runs_due_backup(self, session_factory):
        fake_service = MagicMock()
        fake_service.is_due = AsyncMock(return_value=True)
        fake_service.run_automatic = AsyncMock(return_value="backup")
        with patch("loungeos.server.services.backup.BackupService", return_value=fake_service):
            scheduler = BackupScheduler(session_factory, poll_interval=60)
            assert await scheduler.run_once() == "backup"
        fake_service.run_automatic.assert_awaited_once()

    async def test_start_and_stop(self, session_factory):
        scheduler = BackupScheduler(session_factory, poll_interval=0.01)
        with patch.object(scheduler, "run_once", new_callable=AsyncMock, return_value=None) as mock_run:
            assert scheduler.running is False
            scheduler.start()
            scheduler.start()
            assert scheduler.running is True
            await asyncio.sleep(0.05)
            await scheduler.stop()

        assert scheduler.running is False
        assert mock_run.await_count >= 1

    async def test_failed_run_is_logged_and_retried(self, session_factory):
        scheduler = BackupScheduler(session_factory, poll_interval=0.01)
        with (
            patch.object(scheduler, "run_once", new_callable=AsyncMock, side_effect=RuntimeError("disk full")) as mock_run,
            patch("loungeos.server.services.backup.logger") as mock_logger,
        ):
            scheduler.start()
            await asyncio.sleep(0.05)
            await scheduler.stop()

        assert mock_run.await_count >= 2
        assert "disk full" in mock_logger.error.call_args[0][0]

    async def test_stop_without_start(self, session_factory):
        await BackupScheduler(session_factory, poll_interval=1).stop()
