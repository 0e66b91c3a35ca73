"""
Sticky note entity model.

Notes are short memos staff leave for each other. Tags are stored as a JSON
array string; pinned notes are listed first.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import List, Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class Note(Base, table=True):
    """Entity for a sticky note.

    Table: notes
    """

    __tablename__ = "notes"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(sa_type=Text)
    tags: str = Field(default="[]", sa_type=Text, description="JSON array of tag names")
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    is_pinned: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)

    def get_tags_list(self) -> List[str]:
        """Get tags as a list; unreadable tag data reads as no tags."""
        try:
            return json.loads(self.tags) if self.tags else []
        except (json.JSONDecodeError, TypeError):
            return []

    def set_tags_list(self, tags: List[str]) -> None:
        self.tags = json.dumps(tags)
