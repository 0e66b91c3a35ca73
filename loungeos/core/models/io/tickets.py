"""
Support ticket I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from loungeos.core.models.domain import TicketPriority, TicketStatus


class TicketCommentRead(BaseModel):
    id: int
    ticket_id: int
    author_id: int
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TicketCommentCreate(BaseModel):
    author_id: int
    content: str = Field(min_length=1)


class TicketRead(BaseModel):
    """Schema for reading a ticket; ``comments`` is filled on single-ticket reads."""

    id: int
    title: str
    description: str
    priority: str
    category: str
    status: str
    creator_id: int
    assignee_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    resolved_at: Optional[datetime] = None
    comments: List[TicketCommentRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TicketCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str
    priority: TicketPriority = TicketPriority.medium
    category: str
    creator_id: int
    assignee_id: Optional[int] = None


class TicketUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TicketPriority] = None
    category: Optional[str] = None
    status: Optional[TicketStatus] = None
    assignee_id: Optional[int] = None
