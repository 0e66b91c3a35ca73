"""
Floor API Endpoints.

Floors group dining tables. Floors are addressed by their unique name.
"""

from typing import List

from fastapi import APIRouter, status

from loungeos.core.models.io.floors import FloorCreate, FloorRead
from loungeos.server.services.deps import FloorPlanServiceDep

router = APIRouter()


@router.get("", response_model=List[FloorRead], summary="List Floors")
async def list_floors(service: FloorPlanServiceDep) -> List[FloorRead]:
    return [FloorRead.model_validate(floor) for floor in await service.list_floors()]


@router.post(
    "",
    response_model=FloorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Floor",
    responses={409: {"description": "A floor with this name already exists"}},
)
async def create_floor(data: FloorCreate, service: FloorPlanServiceDep) -> FloorRead:
    return FloorRead.model_validate(await service.create_floor(data.name))


@router.delete(
    "/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Floor",
    description="Delete an empty floor. Floors that still hold tables cannot be deleted.",
    responses={
        400: {"description": "Tables still reference this floor"},
        404: {"description": "Floor not found"},
    },
)
async def delete_floor(name: str, service: FloorPlanServiceDep) -> None:
    await service.delete_floor(name)
