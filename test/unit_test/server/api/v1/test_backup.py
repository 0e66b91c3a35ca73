from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def backup_dir(client: AsyncClient, session, tmp_path: Path) -> Path:
    """Point the backup endpoints at a small file database and a temporary directory."""
    from loungeos.server.main import app
    from loungeos.server.services.backup import BackupService
    from loungeos.server.services.deps import get_backup_service

    source = tmp_path / "source.db"
    async with aiosqlite.connect(str(source)) as db:
        await db.execute("CREATE TABLE sales (id INTEGER PRIMARY KEY, amount REAL)")
        await db.execute("INSERT INTO sales (amount) VALUES (12.5)")
        await db.commit()

    directory = tmp_path / "backups"

    def get_backup_service_override() -> BackupService:
        return BackupService(session, source_path=str(source), directory=str(directory), keep_count=2)

    app.dependency_overrides[get_backup_service] = get_backup_service_override
    return directory


async def test_manual_backup(client: AsyncClient, backup_dir: Path):
    response = await client.post("/api/v1/backup", json={"created_by": "Ada"})
    assert response.status_code == 201
    backup = response.json()
    assert backup["type"] == "manual"
    assert backup["status"] == "completed"
    assert backup["created_by"] == "Ada"
    assert backup["filename"].startswith("loungeos_backup_")
    assert backup["filename"].endswith(".db")

    copy = backup_dir / backup["filename"]
    assert copy.exists()
    assert backup["size"] == copy.stat().st_size
    async with aiosqlite.connect(str(copy)) as db:
        async with db.execute("SELECT amount FROM sales") as cursor:
            assert await cursor.fetchall() == [(12.5,)]


async def test_manual_backup_without_body(client: AsyncClient, backup_dir: Path):
    response = await client.post("/api/v1/backup")
    assert response.status_code == 201
    assert response.json()["created_by"] is None


async def test_history_and_delete(client: AsyncClient, backup_dir: Path):
    backup = (await client.post("/api/v1/backup")).json()

    history = (await client.get("/api/v1/backup/history")).json()
    assert [entry["id"] for entry in history] == [backup["id"]]

    assert (await client.delete(f"/api/v1/backup/{backup['id']}")).status_code == 204
    assert not (backup_dir / backup["filename"]).exists()
    assert (await client.get("/api/v1/backup/history")).json() == []
    assert (await client.delete(f"/api/v1/backup/{backup['id']}")).status_code == 404


async def test_default_schedule(client: AsyncClient, backup_dir: Path):
    response = await client.get("/api/v1/backup/settings")
    assert response.status_code == 200
    assert response.json() == {"frequency": "daily", "enabled": False, "last_backup": None, "next_backup": None}


async def test_update_schedule(client: AsyncClient, backup_dir: Path):
    response = await client.put("/api/v1/backup/settings", json={"frequency": "hourly", "enabled": True})
    assert response.status_code == 200
    body = response.json()
    assert body["frequency"] == "hourly"
    assert body["enabled"] is True
    assert body["next_backup"] is not None

    response = await client.put("/api/v1/backup/settings", json={"frequency": "disabled", "enabled": True})
    assert response.json()["enabled"] is False
    assert response.json()["next_backup"] is None

    response = await client.put("/api/v1/backup/settings", json={"frequency": "yearly", "enabled": True})
    assert response.status_code == 422


async def test_automatic_backup_requires_schedule(client: AsyncClient, backup_dir: Path):
    response = await client.post("/api/v1/backup/auto")
    assert response.status_code == 400
    assert response.json()["detail"] == "Automatic backups are disabled"


async def test_automatic_backup_advances_schedule(client: AsyncClient, backup_dir: Path):
    await client.put("/api/v1/backup/settings", json={"frequency": "daily", "enabled": True})

    response = await client.post("/api/v1/backup/auto")
    assert response.status_code == 201
    backup = response.json()
    assert backup["type"] == "automatic"
    assert backup["created_by"] == "system"

    schedule = (await client.get("/api/v1/backup/settings")).json()
    assert schedule["last_backup"] == backup["created_at"]
    assert schedule["next_backup"] > schedule["last_backup"]
