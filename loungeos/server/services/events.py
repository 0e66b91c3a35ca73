"""
Calendar event service.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.events import CalendarEvent
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.events import CalendarEventRepository
from loungeos.core.errors import InvalidOperationError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.io.events import EventCreate, EventUpdate

logger = get_logger(__name__)

# Columns that cannot be cleared; a null in an update leaves them as they are.
REQUIRED_FIELDS = frozenset({"title", "start_date", "end_date", "capacity"})


def _check_window(title: str, start: datetime, end: datetime) -> None:
    if end < start:
        raise InvalidOperationError(f"Event '{title}' ends before it starts")


class EventService:
    """Service for calendar events."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.events = CalendarEventRepository(session)
        self.activity = ActivityLogRepository(session)

    async def list_events(self) -> List[CalendarEvent]:
        return await self.events.list()

    async def get_event(self, event_id: int) -> CalendarEvent:
        return await self.events.get_or_raise(event_id)

    async def create_event(self, data: EventCreate, actor_id: Optional[int] = None) -> CalendarEvent:
        """
        Schedule an event.

        Raises:
            InvalidOperationError: If the event ends before it starts
        """
        _check_window(data.title, data.start_date, data.end_date)
        event = CalendarEvent(**data.model_dump(), created_by=actor_id)
        try:
            await self.events.add(event)
            await self.activity.record(actor_id, "EVENT_CREATE", f"Created event: {event.title}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(event)
        logger.info(f"Scheduled event {event.id}: {event.title}")
        return event

    async def update_event(self, event_id: int, data: EventUpdate, actor_id: Optional[int] = None) -> CalendarEvent:
        """
        Apply the given fields to an event.

        Raises:
            InvalidOperationError: If the change leaves the event ending before it starts
        """
        event = await self.events.get_or_raise(event_id)
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_FIELDS
        }
        _check_window(
            changes.get("title", event.title),
            changes.get("start_date", event.start_date),
            changes.get("end_date", event.end_date),
        )
        old_title = event.title
        for key, value in changes.items():
            setattr(event, key, value)
        event.updated_at = utc_now()

        details = f"Updated event: {event.title}"
        if old_title != event.title:
            details += f" (was {old_title})"
        try:
            self.session.add(event)
            await self.activity.record(actor_id, "EVENT_UPDATE", details)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(event)
        return event

    async def delete_event(self, event_id: int, actor_id: Optional[int] = None) -> None:
        event = await self.events.get_or_raise(event_id)
        try:
            await self.events.remove(event)
            await self.activity.record(actor_id, "EVENT_DELETE", f"Deleted event: {event.title}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
