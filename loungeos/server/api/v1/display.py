"""
Kitchen and Bar Display Endpoints.

Each board lists open orders (plus canceled ones) grouped into status
columns. Cards move between columns through `PATCH /orders/{id}/status`.
"""

from fastapi import APIRouter

from loungeos.core.models.io.orders import DisplayBoard
from loungeos.server.services.deps import OrderServiceDep

router = APIRouter()


@router.get(
    "/kitchen",
    response_model=DisplayBoard,
    summary="Kitchen Board",
    description="Orders with food lines, showing only those lines.",
)
async def kitchen_board(service: OrderServiceDep) -> DisplayBoard:
    return await service.display_board("kitchen")


@router.get(
    "/bar",
    response_model=DisplayBoard,
    summary="Bar Board",
    description="Orders with drink lines and inventory items, showing only those lines.",
)
async def bar_board(service: OrderServiceDep) -> DisplayBoard:
    return await service.display_board("bar")
