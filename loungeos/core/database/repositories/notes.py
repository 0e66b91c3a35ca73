"""
Sticky note repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.notes import Note
from .base import SQLModelRepository


class NoteRepository(SQLModelRepository[Note]):
    """Repository for sticky notes; pinned notes first, then most recently updated."""

    resource_name = "Note"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Note)

    def _default_order(self):
        return (Note.is_pinned.desc(), Note.updated_at.desc(), Note.id.desc())  # type: ignore
