"""
Calendar Event API Endpoints.

Events are listed with the latest start first. Times are taken as UTC;
offsets in the request are converted.
"""

from typing import List

from fastapi import APIRouter, status

from loungeos.core.models.io.events import EventCreate, EventRead, EventUpdate
from loungeos.server.services.deps import ActorDep, EventServiceDep

router = APIRouter()


@router.get("", response_model=List[EventRead], summary="List Events")
async def list_events(service: EventServiceDep) -> List[EventRead]:
    return [EventRead.model_validate(event) for event in await service.list_events()]


@router.post(
    "",
    response_model=EventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Event",
    responses={400: {"description": "The event ends before it starts"}},
)
async def create_event(data: EventCreate, service: EventServiceDep, actor_id: ActorDep) -> EventRead:
    return EventRead.model_validate(await service.create_event(data, actor_id))


@router.get(
    "/{event_id}",
    response_model=EventRead,
    summary="Get Event",
    responses={404: {"description": "Event not found"}},
)
async def get_event(event_id: int, service: EventServiceDep) -> EventRead:
    return EventRead.model_validate(await service.get_event(event_id))


@router.put(
    "/{event_id}",
    response_model=EventRead,
    summary="Update Event",
    description="Change only the given fields.",
    responses={400: {"description": "The event would end before it starts"}, 404: {"description": "Event not found"}},
)
async def update_event(event_id: int, data: EventUpdate, service: EventServiceDep, actor_id: ActorDep) -> EventRead:
    return EventRead.model_validate(await service.update_event(event_id, data, actor_id))


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Event",
    responses={404: {"description": "Event not found"}},
)
async def delete_event(event_id: int, service: EventServiceDep, actor_id: ActorDep) -> None:
    await service.delete_event(event_id, actor_id)
