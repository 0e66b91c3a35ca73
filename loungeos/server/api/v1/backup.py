"""
Backup API Endpoints.

Manual and automatic copies of the SQLite database, the backup history and
the automatic backup schedule.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Query, status

from loungeos.core.models.domain import BackupType
from loungeos.core.models.io.backups import BackupCreate, BackupRead, BackupSettingsRead, BackupSettingsUpdate
from loungeos.server.services.deps import BackupServiceDep

router = APIRouter()


@router.post(
    "",
    response_model=BackupRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Backup",
    description="Write a manual online copy of the database to the backup directory.",
)
async def create_backup(service: BackupServiceDep, data: Optional[BackupCreate] = Body(default=None)) -> BackupRead:
    backup = await service.create_backup(BackupType.manual, created_by=data.created_by if data else None)
    return BackupRead.model_validate(backup)


@router.get(
    "/history",
    response_model=List[BackupRead],
    summary="Backup History",
    description="The most recent backups, newest first.",
)
async def backup_history(service: BackupServiceDep, limit: int = Query(10, ge=1, le=100)) -> List[BackupRead]:
    return [BackupRead.model_validate(backup) for backup in await service.history(limit)]


@router.get("/settings", response_model=BackupSettingsRead, summary="Get Backup Schedule")
async def get_backup_settings(service: BackupServiceDep) -> BackupSettingsRead:
    return BackupSettingsRead.model_validate(await service.get_settings())


@router.put(
    "/settings",
    response_model=BackupSettingsRead,
    summary="Update Backup Schedule",
    description="Set the frequency and switch automatic backups on or off. The next backup time is computed from now.",
    responses={422: {"description": "Unknown frequency"}},
)
async def update_backup_settings(data: BackupSettingsUpdate, service: BackupServiceDep) -> BackupSettingsRead:
    return BackupSettingsRead.model_validate(await service.update_settings(data))


@router.post(
    "/auto",
    response_model=BackupRead,
    status_code=status.HTTP_201_CREATED,
    summary="Run Automatic Backup",
    description="Take an automatic backup now, advance the schedule and prune old automatic backups.",
    responses={400: {"description": "Automatic backups are disabled"}},
)
async def run_automatic_backup(service: BackupServiceDep) -> BackupRead:
    return BackupRead.model_validate(await service.run_automatic())


@router.delete(
    "/{backup_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Backup",
    description="Delete a backup record and its file.",
    responses={404: {"description": "Backup not found"}},
)
async def delete_backup(backup_id: int, service: BackupServiceDep) -> None:
    await service.delete_backup(backup_id)
