"""Notifications and the activity log."""

from __future__ import annotations

import secrets
import time
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.entities.activity_logs import ActivityLog
from loungeos.core.database.entities.notifications import Notification
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.notifications import NotificationRepository
from loungeos.core.models.io.notifications import ActivityLogCreate, NotificationCreate


def generate_notification_id() -> str:
    return f"notif_{int(time.time() * 1000)}_{secrets.token_hex(4)}"


class NotificationService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.notifications = NotificationRepository(session)
        self.activity = ActivityLogRepository(session)

    async def list_notifications(self, user_id: Optional[int] = None, limit: int = 50) -> List[Notification]:
        return await self.notifications.latest(limit=limit, user_id=user_id)

    async def create_notification(self, data: NotificationCreate) -> Notification:
        return await self.notifications.create(Notification(id=generate_notification_id(), **data.model_dump()))

    async def mark_read(self, notification_id: str) -> Notification:
        notification = await self.notifications.get_or_raise(notification_id)
        notification.is_read = True
        return await self.notifications.update(notification)

    async def mark_all_read(self) -> None:
        await self.notifications.mark_all_read()

    async def clear(self) -> None:
        await self.notifications.clear()

    async def list_activity(self, limit: int = 1000) -> List[Dict[str, Any]]:
        return await self.activity.list_with_user(limit)

    async def add_activity(self, data: ActivityLogCreate) -> ActivityLog:
        entry = await self.activity.record(data.user_id, data.action, data.details)
        await self.session.commit()
        await self.session.refresh(entry)
        return entry

    async def clear_activity(self) -> None:
        await self.activity.clear()
