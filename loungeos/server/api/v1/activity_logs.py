"""
Activity Log API Endpoints.

Services record an entry for staff, order, inventory and accounting writes;
clients can add their own entries too.
"""

from typing import List

from fastapi import APIRouter, Query, status

from loungeos.core.models.io.notifications import ActivityLogCreate, ActivityLogRead
from loungeos.server.services.deps import NotificationServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=List[ActivityLogRead],
    summary="List Activity",
    description="The latest activity entries with the acting user's name and email.",
)
async def list_activity(
    service: NotificationServiceDep, limit: int = Query(1000, ge=1, le=5000)
) -> List[ActivityLogRead]:
    return [ActivityLogRead.model_validate(row) for row in await service.list_activity(limit)]


@router.post("", response_model=ActivityLogRead, status_code=status.HTTP_201_CREATED, summary="Add Activity Entry")
async def add_activity(data: ActivityLogCreate, service: NotificationServiceDep) -> ActivityLogRead:
    entry = await service.add_activity(data)
    return ActivityLogRead(
        id=entry.id,
        user_id=entry.user_id,
        action=entry.action,
        details=entry.details,
        timestamp=entry.timestamp,
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, summary="Clear Activity Log")
async def clear_activity(service: NotificationServiceDep) -> None:
    await service.clear_activity()
