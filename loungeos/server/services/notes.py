"""
Sticky note service.

Every write refreshes ``updated_at``, so the note that changed last comes
first among notes with the same pin state.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.notes import Note
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.notes import NoteRepository
from loungeos.core.logging_config import get_logger
from loungeos.core.models.io.notes import NoteCreate, NoteRead, NoteUpdate

logger = get_logger(__name__)


def to_read(note: Note) -> NoteRead:
    return NoteRead(
        id=note.id,
        title=note.title,
        content=note.content,
        tags=note.get_tags_list(),
        user_id=note.user_id,
        is_pinned=note.is_pinned,
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


class NoteService:
    """Service for sticky notes."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.notes = NoteRepository(session)
        self.activity = ActivityLogRepository(session)

    async def list_notes(self) -> List[NoteRead]:
        return [to_read(note) for note in await self.notes.list()]

    async def create_note(self, data: NoteCreate, actor_id: Optional[int] = None) -> NoteRead:
        note = Note(title=data.title, content=data.content, user_id=actor_id)
        note.set_tags_list(data.tags)
        await self._save(note, actor_id, "NOTE_CREATE", f"Created note: {note.title}")
        return to_read(note)

    async def update_note(self, note_id: int, data: NoteUpdate, actor_id: Optional[int] = None) -> NoteRead:
        note = await self.notes.get_or_raise(note_id)
        note.title = data.title
        note.content = data.content
        note.set_tags_list(data.tags)
        note.updated_at = utc_now()
        await self._save(note, actor_id, "NOTE_UPDATE", f"Updated note: {note.title}")
        return to_read(note)

    async def set_pinned(self, note_id: int, is_pinned: bool, actor_id: Optional[int] = None) -> NoteRead:
        note = await self.notes.get_or_raise(note_id)
        note.is_pinned = is_pinned
        note.updated_at = utc_now()
        verb = "Pinned" if is_pinned else "Unpinned"
        await self._save(note, actor_id, "NOTE_PIN", f"{verb} note: {note.title}")
        return to_read(note)

    async def delete_note(self, note_id: int, actor_id: Optional[int] = None) -> None:
        note = await self.notes.get_or_raise(note_id)
        try:
            await self.notes.remove(note)
            await self.activity.record(actor_id, "NOTE_DELETE", f"Deleted note: {note.title}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def _save(self, note: Note, actor_id: Optional[int], action: str, details: str) -> None:
        try:
            await self.notes.add(note)
            await self.activity.record(actor_id, action, details)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(note)
        logger.debug(details)
