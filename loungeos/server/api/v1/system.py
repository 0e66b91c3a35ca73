"""
System Storage API Endpoints.
"""

from fastapi import APIRouter

from loungeos.core.models.io.backups import SystemStats
from loungeos.server.services.deps import BackupServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=SystemStats,
    summary="System Storage",
    description="Database file size and the used and total bytes of the volume holding it.",
)
async def system_stats(service: BackupServiceDep) -> SystemStats:
    return service.system_stats()
