"""
Inventory API Endpoints.

Inventory items carry a derived stock status. Stock only changes through
movements (IN, OUT, ADJUSTMENT, TRANSFER), which are also the source of the
inventory accounting sync.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from loungeos.core.models.io.inventory import (
    BulkItemCreate,
    BulkMovementCreate,
    InventoryCategoryCreate,
    InventoryCategoryRead,
    InventoryItemCreate,
    InventoryItemRead,
    InventoryItemUpdate,
    InventorySupplierCreate,
    InventorySupplierRead,
    InventorySupplierUpdate,
    MovementCreate,
    MovementRead,
)
from loungeos.server.services.deps import InventoryServiceDep

router = APIRouter()


# Items


@router.get(
    "/items",
    response_model=List[InventoryItemRead],
    summary="List Inventory Items",
    description="List items ordered by name with their supplier and stock status.",
)
async def list_items(service: InventoryServiceDep) -> List[InventoryItemRead]:
    return await service.list_items()


@router.post(
    "/items",
    response_model=InventoryItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Inventory Item",
    responses={409: {"description": "SKU already in use"}},
)
async def create_item(data: InventoryItemCreate, service: InventoryServiceDep) -> InventoryItemRead:
    return await service.create_item(data)


@router.post(
    "/items/bulk",
    response_model=List[InventoryItemRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Inventory Items in Bulk",
    description="Create several items in one transaction. A duplicate SKU rejects the whole batch.",
    responses={409: {"description": "SKU already in use or repeated in the batch"}},
)
async def bulk_create_items(data: BulkItemCreate, service: InventoryServiceDep) -> List[InventoryItemRead]:
    return await service.bulk_create_items(data.items)


@router.get(
    "/items/{item_id}",
    response_model=InventoryItemRead,
    summary="Get Inventory Item",
    responses={404: {"description": "Inventory item not found"}},
)
async def get_item(item_id: int, service: InventoryServiceDep) -> InventoryItemRead:
    return await service.get_item(item_id)


@router.put(
    "/items/{item_id}",
    response_model=InventoryItemRead,
    summary="Update Inventory Item",
    responses={404: {"description": "Inventory item not found"}, 409: {"description": "SKU already in use"}},
)
async def update_item(item_id: int, data: InventoryItemUpdate, service: InventoryServiceDep) -> InventoryItemRead:
    return await service.update_item(item_id, data)


@router.delete(
    "/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Inventory Item",
    description="Delete an item together with its movement history.",
    responses={404: {"description": "Inventory item not found"}},
)
async def delete_item(item_id: int, service: InventoryServiceDep) -> None:
    await service.delete_item(item_id)


# Movements


@router.get(
    "/movements",
    response_model=List[MovementRead],
    summary="List Stock Movements",
    description="List movements newest first, for one item or within an inclusive date range.",
)
async def list_movements(
    service: InventoryServiceDep,
    item_id: Optional[int] = None,
    limit: int = Query(100, ge=1, le=1000),
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[MovementRead]:
    return await service.list_movements(item_id=item_id, limit=limit, start=start, end=end)


@router.get(
    "/movements/export",
    summary="Export Stock Movements",
    description="Download the movements of an inclusive date range as CSV.",
    response_description="A CSV attachment.",
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_movements(service: InventoryServiceDep, start: date, end: date) -> Response:
    content = await service.export_movements_csv(start, end)
    filename = f"inventory-movements-{start.isoformat()}-{end.isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/movements",
    response_model=MovementRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Stock Movement",
    description="Record a movement and update the item's stock in one transaction.",
    responses={
        400: {"description": "Invalid quantity for the movement type"},
        404: {"description": "Inventory item not found"},
    },
)
async def record_movement(data: MovementCreate, service: InventoryServiceDep) -> MovementRead:
    """
    Record a stock movement.

    - **IN** adds `quantity`; **OUT** and **TRANSFER** remove it.
    - **ADJUSTMENT** applies the signed `quantity` as given.
    - `total_cost` is `unit_cost × quantity` when a unit cost is given.
    """
    return await service.record_movement(data)


@router.post(
    "/movements/bulk",
    response_model=List[MovementRead],
    status_code=status.HTTP_201_CREATED,
    summary="Record Stock Movements in Bulk",
    description="Record several movements in one transaction.",
    responses={
        400: {"description": "Invalid quantity for the movement type"},
        404: {"description": "Inventory item not found"},
    },
)
async def record_bulk_movements(data: BulkMovementCreate, service: InventoryServiceDep) -> List[MovementRead]:
    return await service.record_bulk_movements(data.movements, data.user_id)


# Reference data


@router.get("/categories", response_model=List[InventoryCategoryRead], summary="List Inventory Categories")
async def list_categories(service: InventoryServiceDep) -> List[InventoryCategoryRead]:
    return [InventoryCategoryRead.model_validate(category) for category in await service.list_categories()]


@router.post(
    "/categories",
    response_model=InventoryCategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Inventory Category",
    responses={409: {"description": "Category name already exists"}},
)
async def create_category(data: InventoryCategoryCreate, service: InventoryServiceDep) -> InventoryCategoryRead:
    return InventoryCategoryRead.model_validate(await service.create_category(data))


@router.get("/suppliers", response_model=List[InventorySupplierRead], summary="List Inventory Suppliers")
async def list_suppliers(service: InventoryServiceDep) -> List[InventorySupplierRead]:
    return [InventorySupplierRead.model_validate(supplier) for supplier in await service.list_suppliers()]


@router.get(
    "/suppliers/{supplier_id}",
    response_model=InventorySupplierRead,
    summary="Get Inventory Supplier",
    responses={404: {"description": "Supplier not found"}},
)
async def get_supplier(supplier_id: int, service: InventoryServiceDep) -> InventorySupplierRead:
    return InventorySupplierRead.model_validate(await service.get_supplier(supplier_id))


@router.post(
    "/suppliers",
    response_model=InventorySupplierRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Inventory Supplier",
)
async def create_supplier(data: InventorySupplierCreate, service: InventoryServiceDep) -> InventorySupplierRead:
    return InventorySupplierRead.model_validate(await service.create_supplier(data))


@router.put(
    "/suppliers/{supplier_id}",
    response_model=InventorySupplierRead,
    summary="Update Inventory Supplier",
    responses={404: {"description": "Supplier not found"}},
)
async def update_supplier(
    supplier_id: int, data: InventorySupplierUpdate, service: InventoryServiceDep
) -> InventorySupplierRead:
    return InventorySupplierRead.model_validate(await service.update_supplier(supplier_id, data))


@router.delete(
    "/suppliers/{supplier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Inventory Supplier",
    responses={404: {"description": "Supplier not found"}},
)
async def delete_supplier(supplier_id: int, service: InventoryServiceDep) -> None:
    await service.delete_supplier(supplier_id)


# Analytics


@router.get(
    "/stats",
    summary="Inventory Statistics",
    description="Item counts by stock level, stock value at cost and movements of the last 7 days.",
)
async def inventory_stats(service: InventoryServiceDep):
    return await service.stats()


@router.get(
    "/dashboard",
    summary="Inventory Dashboard",
    description="6-month IN/OUT chart, category distribution, latest movements and low-stock alerts.",
)
async def inventory_dashboard(service: InventoryServiceDep):
    return await service.dashboard()
