"""
Support ticket entity models.

Tickets track internal support requests. Comments form a flat thread per
ticket; posting one refreshes the ticket's ``updated_at``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class Ticket(Base, table=True):
    """Entity for a support ticket.

    Table: tickets
    """

    __tablename__ = "tickets"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: str = Field(sa_type=Text)
    priority: str = Field(default="Medium", max_length=16, index=True)
    category: str = Field(max_length=64, index=True)
    status: str = Field(default="Open", max_length=16, index=True)
    creator_id: int = Field(foreign_key="users.id", index=True)
    assignee_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
    resolved_at: Optional[datetime] = Field(default=None, sa_type=DateTime)


class TicketComment(Base, table=True):
    """Entity for a comment on a ticket.

    Table: ticket_comments
    """

    __tablename__ = "ticket_comments"

    id: Optional[int] = Field(default=None, primary_key=True)
    ticket_id: int = Field(foreign_key="tickets.id", index=True)
    author_id: int = Field(foreign_key="users.id")
    content: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
