"""
Support ticket repositories.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.tickets import Ticket, TicketComment
from .base import SQLModelRepository


class TicketRepository(SQLModelRepository[Ticket]):
    """Repository for support tickets."""

    resource_name = "Ticket"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Ticket)

    def _default_order(self):
        return (Ticket.updated_at.desc(), Ticket.id.desc())  # type: ignore

    async def search(self, filters: Optional[Dict[str, Any]] = None) -> List[Ticket]:
        """List tickets matching the given filters, most recently updated first.

        Args:
            filters: Field filters (status, priority, category, assignee_id, creator_id)
        """
        return await self.list(filters=filters)


class TicketCommentRepository(SQLModelRepository[TicketComment]):
    """Repository for ticket comments."""

    resource_name = "Ticket comment"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TicketComment)

    async def list_for_ticket(self, ticket_id: int) -> List[TicketComment]:
        stmt = select(TicketComment).where(TicketComment.ticket_id == ticket_id)
        stmt = stmt.order_by(TicketComment.created_at.asc(), TicketComment.id.asc())  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_for_ticket(self, ticket_id: int) -> None:
        await self.session.execute(delete(TicketComment).where(TicketComment.ticket_id == ticket_id))
        await self.session.flush()
