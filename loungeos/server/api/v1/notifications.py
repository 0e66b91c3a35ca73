"""
Notification API Endpoints.

Notifications either target one staff member or, without a `user_id`,
everyone.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from loungeos.core.models.io.notifications import NotificationCreate, NotificationRead
from loungeos.server.services.deps import NotificationServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=List[NotificationRead],
    summary="List Notifications",
    description="The latest notifications; with `user_id`, that user's own plus broadcast ones.",
)
async def list_notifications(
    service: NotificationServiceDep,
    user_id: Optional[int] = None,
    limit: int = Query(50, ge=1, le=500),
) -> List[NotificationRead]:
    notifications = await service.list_notifications(user_id=user_id, limit=limit)
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("", response_model=NotificationRead, status_code=status.HTTP_201_CREATED, summary="Create Notification")
async def create_notification(data: NotificationCreate, service: NotificationServiceDep) -> NotificationRead:
    return NotificationRead.model_validate(await service.create_notification(data))


@router.post("/read-all", summary="Mark All Notifications Read")
async def mark_all_read(service: NotificationServiceDep):
    await service.mark_all_read()
    return {"message": "All notifications marked as read"}


@router.patch(
    "/{notification_id}/read",
    response_model=NotificationRead,
    summary="Mark Notification Read",
    responses={404: {"description": "Notification not found"}},
)
async def mark_read(notification_id: str, service: NotificationServiceDep) -> NotificationRead:
    return NotificationRead.model_validate(await service.mark_read(notification_id))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, summary="Clear Notifications")
async def clear_notifications(service: NotificationServiceDep) -> None:
    await service.clear()
