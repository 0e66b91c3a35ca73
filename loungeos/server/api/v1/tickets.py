"""
Support Ticket API Endpoints.

Tickets are listed by most recent activity. Adding a comment counts as
activity; moving a ticket to Resolved or Closed stamps `resolved_at`.
"""

from typing import List, Optional

from fastapi import APIRouter, status

from loungeos.core.models.domain import TicketPriority, TicketStatus
from loungeos.core.models.io.tickets import (
    TicketCommentCreate,
    TicketCommentRead,
    TicketCreate,
    TicketRead,
    TicketUpdate,
)
from loungeos.server.services.deps import ActorDep, TicketServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=List[TicketRead],
    summary="List Tickets",
    description="List tickets by latest update, with optional filters. Comments are not included.",
)
async def list_tickets(
    service: TicketServiceDep,
    status: Optional[TicketStatus] = None,
    priority: Optional[TicketPriority] = None,
    category: Optional[str] = None,
    assigned_to: Optional[int] = None,
    created_by: Optional[int] = None,
) -> List[TicketRead]:
    tickets = await service.list_tickets(
        status=status,
        priority=priority.value if priority else None,
        category=category,
        assigned_to=assigned_to,
        created_by=created_by,
    )
    return [TicketRead.model_validate(ticket) for ticket in tickets]


@router.post("", response_model=TicketRead, status_code=status.HTTP_201_CREATED, summary="Create Ticket")
async def create_ticket(data: TicketCreate, service: TicketServiceDep) -> TicketRead:
    return TicketRead.model_validate(await service.create_ticket(data))


@router.get(
    "/{ticket_id}",
    response_model=TicketRead,
    summary="Get Ticket",
    description="Get a ticket with its comments, oldest comment first.",
    responses={404: {"description": "Ticket not found"}},
)
async def get_ticket(ticket_id: int, service: TicketServiceDep) -> TicketRead:
    return await service.get_ticket(ticket_id)


@router.put(
    "/{ticket_id}",
    response_model=TicketRead,
    summary="Update Ticket",
    responses={404: {"description": "Ticket not found"}},
)
async def update_ticket(ticket_id: int, data: TicketUpdate, service: TicketServiceDep, actor_id: ActorDep) -> TicketRead:
    return await service.update_ticket(ticket_id, data, actor_id)


@router.delete(
    "/{ticket_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Ticket",
    responses={404: {"description": "Ticket not found"}},
)
async def delete_ticket(ticket_id: int, service: TicketServiceDep, actor_id: ActorDep) -> None:
    await service.delete_ticket(ticket_id, actor_id)


@router.get(
    "/{ticket_id}/comments",
    response_model=List[TicketCommentRead],
    summary="List Ticket Comments",
    responses={404: {"description": "Ticket not found"}},
)
async def list_comments(ticket_id: int, service: TicketServiceDep) -> List[TicketCommentRead]:
    return [TicketCommentRead.model_validate(comment) for comment in await service.list_comments(ticket_id)]


@router.post(
    "/{ticket_id}/comments",
    response_model=TicketCommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Ticket Comment",
    responses={404: {"description": "Ticket not found"}},
)
async def add_comment(ticket_id: int, data: TicketCommentCreate, service: TicketServiceDep) -> TicketCommentRead:
    return TicketCommentRead.model_validate(await service.add_comment(ticket_id, data))
