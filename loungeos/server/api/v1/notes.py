"""
Sticky Note API Endpoints.

Pinned notes come first, then the most recently changed.
"""

from typing import List

from fastapi import APIRouter, status

from loungeos.core.models.io.notes import NoteCreate, NotePin, NoteRead, NoteUpdate
from loungeos.server.services.deps import ActorDep, NoteServiceDep

router = APIRouter()


@router.get("", response_model=List[NoteRead], summary="List Notes")
async def list_notes(service: NoteServiceDep) -> List[NoteRead]:
    return await service.list_notes()


@router.post("", response_model=NoteRead, status_code=status.HTTP_201_CREATED, summary="Create Note")
async def create_note(data: NoteCreate, service: NoteServiceDep, actor_id: ActorDep) -> NoteRead:
    return await service.create_note(data, actor_id)


@router.put(
    "/{note_id}",
    response_model=NoteRead,
    summary="Update Note",
    description="Replace the title, content and tags of a note.",
    responses={404: {"description": "Note not found"}},
)
async def update_note(note_id: int, data: NoteUpdate, service: NoteServiceDep, actor_id: ActorDep) -> NoteRead:
    return await service.update_note(note_id, data, actor_id)


@router.put(
    "/{note_id}/pin",
    response_model=NoteRead,
    summary="Pin Note",
    description="Pin or unpin a note.",
    responses={404: {"description": "Note not found"}},
)
async def pin_note(note_id: int, data: NotePin, service: NoteServiceDep, actor_id: ActorDep) -> NoteRead:
    return await service.set_pinned(note_id, data.is_pinned, actor_id)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Note",
    responses={404: {"description": "Note not found"}},
)
async def delete_note(note_id: int, service: NoteServiceDep, actor_id: ActorDep) -> None:
    await service.delete_note(note_id, actor_id)
