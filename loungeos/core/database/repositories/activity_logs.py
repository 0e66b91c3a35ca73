"""
Activity log repository.

Services record activity inside their own unit of work through ``record``;
the API adds standalone entries through ``create``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.activity_logs import ActivityLog
from ..entities.staff import StaffMember
from .base import SQLModelRepository


class ActivityLogRepository(SQLModelRepository[ActivityLog]):
    """Repository for the activity audit trail."""

    resource_name = "Activity log"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ActivityLog)

    async def record(self, user_id: Optional[int], action: str, details: str) -> ActivityLog:
        """Stage an activity entry in the current transaction."""
        return await self.add(ActivityLog(user_id=user_id, action=action, details=details))

    async def list_with_user(self, limit: int = 1000) -> List[Dict[str, Any]]:
        """Get the latest activity entries joined with the acting user."""
        stmt = (
            select(ActivityLog, StaffMember.name, StaffMember.email)
            .outerjoin(StaffMember, ActivityLog.user_id == StaffMember.id)
            .order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc())  # type: ignore
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "id": log.id,
                "user_id": log.user_id,
                "user_name": name,
                "user_email": email,
                "action": log.action,
                "details": log.details,
                "timestamp": log.timestamp,
            }
            for log, name, email in result.all()
        ]

    async def clear(self) -> None:
        await self.session.execute(delete(ActivityLog))
        await self.session.commit()
