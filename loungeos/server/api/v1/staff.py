"""
Staff API Endpoints.

Staff members are addressed by email. New accounts receive the configured
default password and must change it on first sign-in.
"""

from typing import List

from fastapi import APIRouter, Query, status

from loungeos.core.models.io.staff import StaffCreate, StaffPerformance, StaffRead, StaffUpdate
from loungeos.server.services.deps import ActorDep, StaffServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=List[StaffRead],
    summary="List Staff",
    description="List every staff member ordered by name.",
)
async def list_staff(service: StaffServiceDep) -> List[StaffRead]:
    return [StaffRead.model_validate(member) for member in await service.list_staff()]


@router.get(
    "/performance",
    response_model=List[StaffPerformance],
    summary="Staff Performance",
    description="Orders processed, completed revenue, average order value and completion rate per staff member.",
    response_description="Staff members ranked by completed revenue.",
)
async def staff_performance(service: StaffServiceDep) -> List[StaffPerformance]:
    return await service.performance()


@router.get(
    "/by-email",
    response_model=StaffRead,
    summary="Get Staff Member by Email",
    responses={404: {"description": "Staff member not found"}},
)
async def get_staff_by_email(service: StaffServiceDep, email: str = Query(...)) -> StaffRead:
    return StaffRead.model_validate(await service.get_by_email(email))


@router.post(
    "",
    response_model=StaffRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Staff Member",
    description="Create a staff member with the default password. The first sign-in forces a password change.",
    responses={
        201: {"description": "Staff member created"},
        409: {"description": "Email already in use"},
    },
)
async def create_staff(data: StaffCreate, service: StaffServiceDep, actor_id: ActorDep) -> StaffRead:
    return StaffRead.model_validate(await service.create_staff(data, actor_id))


@router.put(
    "/{email}",
    response_model=StaffRead,
    summary="Update Staff Member",
    responses={404: {"description": "Staff member not found"}},
)
async def update_staff(email: str, data: StaffUpdate, service: StaffServiceDep, actor_id: ActorDep) -> StaffRead:
    return StaffRead.model_validate(await service.update_staff(email, data, actor_id))


@router.delete(
    "/{email}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Staff Member",
    responses={404: {"description": "Staff member not found"}},
)
async def delete_staff(email: str, service: StaffServiceDep, actor_id: ActorDep) -> None:
    await service.delete_staff(email, actor_id)
