"""
Order API Endpoints.

Orders are created with their lines in one transaction; product lines take
stock from the menu and inventory lines from the inventory. Status changes
follow the order lifecycle: Pending, In Progress and Ready move back and
forth, Ready moves to Completed, and any open order can be Canceled.
"""

from typing import List, Optional

from fastapi import APIRouter, status

from loungeos.core.models.domain import OrderStatus
from loungeos.core.models.io.orders import (
    MergeRequest,
    OrderCreate,
    OrderRead,
    OrderStatusUpdate,
    OrderUpdate,
    SplitRequest,
    SplitResult,
)
from loungeos.server.services.deps import ActorDep, OrderServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=List[OrderRead],
    summary="List Orders",
    description="List orders newest first, optionally filtered by status.",
)
async def list_orders(service: OrderServiceDep, status: Optional[OrderStatus] = None) -> List[OrderRead]:
    return await service.list_orders(status)


@router.get(
    "/stats",
    summary="Order Statistics",
    description="Order counts, completed revenue, the 10 latest completed sales and the 5 best-selling products.",
)
async def order_stats(service: OrderServiceDep):
    return await service.stats()


@router.post(
    "/split",
    response_model=SplitResult,
    summary="Split Order",
    description="Move quantities of some lines into a new Pending order on the same table.",
    response_description="The remaining original order (null when emptied) and the new order.",
    responses={
        400: {"description": "Split quantity exceeds the ordered quantity or the item is not on the order"},
        404: {"description": "Order not found"},
    },
)
async def split_order(data: SplitRequest, service: OrderServiceDep) -> SplitResult:
    return await service.split_order(data.order_id, data.items)


@router.post(
    "/merge",
    response_model=OrderRead,
    summary="Merge Orders",
    description="Move every line of the source order into the target order and delete the source.",
    responses={
        400: {"description": "An order cannot be merged into itself"},
        404: {"description": "Order not found"},
    },
)
async def merge_orders(data: MergeRequest, service: OrderServiceDep) -> OrderRead:
    return await service.merge_orders(data.from_order_id, data.to_order_id)


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    summary="Get Order",
    responses={404: {"description": "Order not found"}},
)
async def get_order(order_id: str, service: OrderServiceDep) -> OrderRead:
    return await service.get_order(order_id)


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Order",
    description="Create an order with its lines and deduct stock for every line.",
    responses={
        201: {"description": "Order created"},
        404: {"description": "A product or inventory item does not exist; nothing is written"},
    },
)
async def create_order(data: OrderCreate, service: OrderServiceDep, actor_id: ActorDep) -> OrderRead:
    """
    Create an order.

    - **subtotal** defaults to the sum of price × quantity over the lines.
    - **total** defaults to subtotal + tax - discount.
    - Line prices default to the catalog price.
    """
    return await service.create_order(data, actor_id)


@router.put(
    "/{order_id}",
    response_model=OrderRead,
    summary="Update Order",
    description="Update an order's financials; a non-empty `items` list replaces its lines.",
    responses={404: {"description": "Order not found"}},
)
async def update_order(order_id: str, data: OrderUpdate, service: OrderServiceDep, actor_id: ActorDep) -> OrderRead:
    return await service.update_order(order_id, data, actor_id)


@router.patch(
    "/{order_id}/status",
    response_model=OrderRead,
    summary="Change Order Status",
    description="Move an order along its lifecycle. Also used by the kitchen and bar boards.",
    responses={
        404: {"description": "Order not found"},
        409: {"description": "The status change is not allowed"},
    },
)
async def update_order_status(
    order_id: str, data: OrderStatusUpdate, service: OrderServiceDep, actor_id: ActorDep
) -> OrderRead:
    return await service.update_status(order_id, data, actor_id)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Order",
    responses={404: {"description": "Order not found"}},
)
async def delete_order(order_id: str, service: OrderServiceDep, actor_id: ActorDep) -> None:
    await service.delete_order(order_id, actor_id)
