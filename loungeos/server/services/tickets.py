"""
Support ticket service.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.tickets import Ticket, TicketComment
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.tickets import TicketCommentRepository, TicketRepository
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import TicketStatus
from loungeos.core.models.io.tickets import (
    TicketCommentCreate,
    TicketCommentRead,
    TicketCreate,
    TicketRead,
    TicketUpdate,
)

logger = get_logger(__name__)

CLOSING_STATUSES = (TicketStatus.resolved, TicketStatus.closed)


class TicketService:
    """Service for support tickets and their comment threads."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tickets = TicketRepository(session)
        self.comments = TicketCommentRepository(session)
        self.activity = ActivityLogRepository(session)

    async def list_tickets(
        self,
        status: Optional[TicketStatus] = None,
        priority: Optional[str] = None,
        category: Optional[str] = None,
        assigned_to: Optional[int] = None,
        created_by: Optional[int] = None,
    ) -> List[Ticket]:
        return await self.tickets.search(
            {
                "status": status.value if status else None,
                "priority": priority,
                "category": category,
                "assignee_id": assigned_to,
                "creator_id": created_by,
            }
        )

    async def get_ticket(self, ticket_id: int) -> TicketRead:
        ticket = await self.tickets.get_or_raise(ticket_id)
        read = TicketRead.model_validate(ticket)
        read.comments = [TicketCommentRead.model_validate(c) for c in await self.comments.list_for_ticket(ticket_id)]
        return read

    async def create_ticket(self, data: TicketCreate) -> Ticket:
        ticket = Ticket(
            title=data.title,
            description=data.description,
            priority=data.priority.value,
            category=data.category,
            status=TicketStatus.open.value,
            creator_id=data.creator_id,
            assignee_id=data.assignee_id,
        )
        ticket = await self.tickets.create(ticket)
        logger.info(f"Opened ticket {ticket.id}: {ticket.title}")
        return ticket

    async def update_ticket(self, ticket_id: int, data: TicketUpdate, actor_id: Optional[int] = None) -> TicketRead:
        """
        Update a ticket.

        Moving a ticket to Resolved or Closed stamps ``resolved_at``.
        """
        ticket = await self.tickets.get_or_raise(ticket_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(ticket, key, value.value if isinstance(value, Enum) else value)
        now = utc_now()
        ticket.updated_at = now
        if data.status in CLOSING_STATUSES:
            ticket.resolved_at = now
        try:
            self.session.add(ticket)
            await self.activity.record(actor_id, "TICKET_UPDATE", f"Updated ticket #{ticket_id} ({ticket.status})")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return await self.get_ticket(ticket_id)

    async def delete_ticket(self, ticket_id: int, actor_id: Optional[int] = None) -> None:
        ticket = await self.tickets.get_or_raise(ticket_id)
        try:
            await self.comments.delete_for_ticket(ticket_id)
            await self.tickets.remove(ticket)
            await self.activity.record(actor_id, "TICKET_DELETE", f"Deleted ticket #{ticket_id}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def list_comments(self, ticket_id: int) -> List[TicketComment]:
        await self.tickets.get_or_raise(ticket_id)
        return await self.comments.list_for_ticket(ticket_id)

    async def add_comment(self, ticket_id: int, data: TicketCommentCreate) -> TicketComment:
        """Add a comment and refresh the ticket's ``updated_at``."""
        ticket = await self.tickets.get_or_raise(ticket_id)
        comment = TicketComment(ticket_id=ticket_id, author_id=data.author_id, content=data.content)
        try:
            await self.comments.add(comment)
            ticket.updated_at = utc_now()
            self.session.add(ticket)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(comment)
        return comment
