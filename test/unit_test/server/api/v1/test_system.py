from pathlib import Path

import aiosqlite
import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_system_stats_fields(client: AsyncClient):
    response = await client.get("/api/v1/system-stats")
    assert response.status_code == 200
    stats = response.json()
    assert set(stats) == {"db_size", "server_used_storage", "server_total_storage"}
    assert 0 < stats["server_used_storage"] <= stats["server_total_storage"]


async def test_system_stats_reports_file_size(client: AsyncClient, session, tmp_path: Path):
    from loungeos.server.main import app
    from loungeos.server.services.backup import BackupService
    from loungeos.server.services.deps import get_backup_service

    source = tmp_path / "pos.db"
    async with aiosqlite.connect(str(source)) as db:
        await db.execute("CREATE TABLE t (x INTEGER)")
        await db.commit()

    app.dependency_overrides[get_backup_service] = lambda: BackupService(session, source_path=str(source))
    stats = (await client.get("/api/v1/system-stats")).json()
    assert stats["db_size"] == source.stat().st_size
    assert stats["db_size"] > 0
