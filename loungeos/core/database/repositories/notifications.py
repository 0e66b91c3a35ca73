"""
Notification repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import or_, select

from ..entities.notifications import Notification
from .base import SQLModelRepository


class NotificationRepository(SQLModelRepository[Notification]):
    """Repository for in-app notifications."""

    resource_name = "Notification"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Notification)

    async def latest(self, limit: int = 50, user_id: Optional[int] = None) -> List[Notification]:
        """Get the latest notifications.

        Args:
            limit: Maximum records to return
            user_id: When given, the user's own notifications plus broadcast ones
        """
        stmt = select(Notification)
        if user_id is not None:
            stmt = stmt.where(or_(Notification.user_id == user_id, Notification.user_id == None))  # noqa: E711
        stmt = stmt.order_by(Notification.created_at.desc()).limit(limit)  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_all_read(self) -> None:
        await self.session.execute(update(Notification).values(is_read=True))
        await self.session.commit()

    async def clear(self) -> None:
        await self.session.execute(delete(Notification))
        await self.session.commit()
