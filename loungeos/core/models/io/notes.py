"""
Sticky note I/O models for API requests and responses.

Tags travel as a list of strings; the entity keeps them as a JSON string.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class NoteRead(BaseModel):
    id: int
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    user_id: Optional[int] = None
    is_pinned: bool
    created_at: datetime
    updated_at: datetime


class NoteCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: List[str] = Field(default_factory=list)


class NoteUpdate(BaseModel):
    """Schema for rewriting a note; title, content and tags are replaced together."""

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: List[str] = Field(default_factory=list)


class NotePin(BaseModel):
    is_pinned: bool
