"""
Calendar event repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.events import CalendarEvent
from .base import SQLModelRepository


class CalendarEventRepository(SQLModelRepository[CalendarEvent]):
    """Repository for calendar events, latest start first."""

    resource_name = "Event"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CalendarEvent)

    def _default_order(self):
        return (CalendarEvent.start_date.desc(), CalendarEvent.id.desc())  # type: ignore
