"""
Inventory service.

Stock levels only change through movements. Recording a movement writes the
movement, the new stock level and an activity entry in one transaction.

Stock delta per movement type:

- IN: ``+quantity``
- OUT and TRANSFER: ``-quantity``
- ADJUSTMENT: the signed ``quantity`` as given
"""

from __future__ import annotations

import csv
import io
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.inventory import (
    InventoryCategory,
    InventoryItem,
    InventoryMovement,
    InventorySupplier,
)
from loungeos.core.database.entities.staff import StaffMember
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.inventory import (
    InventoryCategoryRepository,
    InventoryItemRepository,
    InventoryMovementRepository,
    InventorySupplierRepository,
)
from loungeos.core.errors import ConflictError, InvalidOperationError, NotFoundError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import MovementType, StockStatus
from loungeos.core.models.io.inventory import (
    InventoryCategoryCreate,
    InventoryItemCreate,
    InventoryItemRead,
    InventoryItemUpdate,
    InventorySupplierCreate,
    InventorySupplierUpdate,
    MovementCreate,
    MovementRead,
)

from .periods import MONTH_NAMES, day_bounds, last_months, month_bounds

logger = get_logger(__name__)

MOVEMENT_ACTIONS = {
    MovementType.stock_in: "STOCK_IN",
    MovementType.stock_out: "STOCK_OUT",
    MovementType.adjustment: "STOCK_ADJUSTMENT",
    MovementType.transfer: "STOCK_TRANSFER",
}

EXPORT_HEADERS = ["Date", "Item", "SKU", "Type", "Quantity", "Unit Cost", "Total Cost", "Reference", "Notes", "User"]


def stock_status(current_stock: int, min_stock_level: int) -> StockStatus:
    if current_stock <= 0:
        return StockStatus.out_of_stock
    if current_stock < min_stock_level:
        return StockStatus.low_stock
    return StockStatus.in_stock


def stock_delta(movement_type: MovementType, quantity: int) -> int:
    if movement_type in (MovementType.stock_in, MovementType.adjustment):
        return quantity
    return -quantity


def _item_read(item: InventoryItem, supplier: Optional[InventorySupplier]) -> InventoryItemRead:
    return InventoryItemRead(
        **item.model_dump(),
        supplier_name=supplier.name if supplier else None,
        status=stock_status(item.current_stock, item.min_stock_level).value,
    )


def _movement_read(
    movement: InventoryMovement, item: Optional[InventoryItem], user: Optional[StaffMember]
) -> MovementRead:
    return MovementRead(
        **movement.model_dump(),
        item_name=item.name if item else None,
        sku=item.sku if item else None,
        user_name=user.name if user else None,
    )


class InventoryService:
    """Service for inventory items, stock movements and inventory analytics."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.items = InventoryItemRepository(session)
        self.movements = InventoryMovementRepository(session)
        self.categories = InventoryCategoryRepository(session)
        self.suppliers = InventorySupplierRepository(session)
        self.activity = ActivityLogRepository(session)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    async def list_items(self) -> List[InventoryItemRead]:
        return [_item_read(item, supplier) for item, supplier in await self.items.list_with_supplier()]

    async def get_item(self, item_id: int) -> InventoryItemRead:
        found = await self.items.get_with_supplier(item_id)
        if found is None:
            raise NotFoundError("Inventory item", item_id)
        return _item_read(*found)

    async def create_item(self, data: InventoryItemCreate) -> InventoryItemRead:
        if await self.items.get_by_sku(data.sku) is not None:
            raise ConflictError(f"An inventory item with SKU {data.sku} already exists")
        item = await self.items.create(InventoryItem(**data.model_dump()))
        logger.info(f"Created inventory item {item.id} ({item.sku})")
        return await self.get_item(item.id)

    async def bulk_create_items(self, items: Sequence[InventoryItemCreate]) -> List[InventoryItemRead]:
        """Create several items at once; any duplicate SKU aborts the whole batch."""
        skus = [data.sku for data in items]
        if len(set(skus)) != len(skus):
            raise ConflictError("Duplicate SKU in the submitted items")
        created = []
        try:
            for data in items:
                if await self.items.get_by_sku(data.sku) is not None:
                    raise ConflictError(f"An inventory item with SKU {data.sku} already exists")
                created.append(await self.items.add(InventoryItem(**data.model_dump())))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Created {len(created)} inventory items in bulk")
        return [await self.get_item(item.id) for item in created]

    async def update_item(self, item_id: int, data: InventoryItemUpdate) -> InventoryItemRead:
        item = await self.items.get_or_raise(item_id)
        changes = data.model_dump(exclude_unset=True)
        if "sku" in changes and changes["sku"] != item.sku:
            if await self.items.get_by_sku(changes["sku"]) is not None:
                raise ConflictError(f"An inventory item with SKU {changes['sku']} already exists")
        for key, value in changes.items():
            setattr(item, key, value)
        item.updated_at = utc_now()
        await self.items.update(item)
        return await self.get_item(item_id)

    async def delete_item(self, item_id: int) -> None:
        item = await self.items.get_or_raise(item_id)
        try:
            await self.movements.delete_for_item(item_id)
            await self.items.remove(item)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    # ------------------------------------------------------------------
    # Movements
    # ------------------------------------------------------------------

    async def _apply_movement(self, data: MovementCreate, user_id: Optional[int]) -> Tuple[InventoryMovement, InventoryItem]:
        if data.movement_type is MovementType.adjustment:
            if data.quantity == 0:
                raise InvalidOperationError("An adjustment quantity cannot be zero")
        elif data.quantity <= 0:
            raise InvalidOperationError(f"{data.movement_type.value} movements need a positive quantity")

        item = await self.items.get_or_raise(data.item_id)
        item.current_stock += stock_delta(data.movement_type, data.quantity)
        item.updated_at = utc_now()
        self.session.add(item)

        movement = InventoryMovement(
            item_id=data.item_id,
            movement_type=data.movement_type.value,
            quantity=data.quantity,
            unit_cost=data.unit_cost,
            total_cost=data.unit_cost * data.quantity if data.unit_cost is not None else None,
            reference_number=data.reference_number,
            reference_type=data.reference_type.value if data.reference_type else None,
            notes=data.notes,
            user_id=user_id,
        )
        await self.movements.add(movement)
        return movement, item

    async def record_movement(self, data: MovementCreate) -> MovementRead:
        """
        Record one stock movement.

        Raises:
            NotFoundError: If the item does not exist
            InvalidOperationError: For a non-positive IN/OUT/TRANSFER quantity or a zero adjustment
        """
        try:
            movement, item = await self._apply_movement(data, data.user_id)
            await self.activity.record(
                data.user_id,
                MOVEMENT_ACTIONS[data.movement_type],
                f"{data.movement_type.value} {data.quantity} {item.unit} of {item.name} (stock now {item.current_stock})",
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Recorded {data.movement_type.value} movement {movement.id} for item {item.id}")
        return _movement_read(movement, item, None)

    async def record_bulk_movements(
        self, movements: Sequence[MovementCreate], user_id: Optional[int] = None
    ) -> List[MovementRead]:
        """Record several movements in one transaction with a single activity entry."""
        recorded = []
        try:
            for data in movements:
                actor = data.user_id if data.user_id is not None else user_id
                recorded.append(await self._apply_movement(data, actor))
            await self.activity.record(
                user_id, "BULK_STOCK_MOVEMENT", f"Recorded {len(recorded)} stock movements"
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return [_movement_read(movement, item, None) for movement, item in recorded]

    async def list_movements(
        self,
        item_id: Optional[int] = None,
        limit: int = 100,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[MovementRead]:
        """List movements by item, or all movements within an inclusive date range."""
        start_at = day_bounds(start)[0] if start else None
        end_at = day_bounds(end)[1] if end else None
        rows = await self.movements.list_detailed(
            item_id=item_id,
            start=start_at,
            end=end_at,
            limit=None if (start or end) else limit,
        )
        return [_movement_read(*row) for row in rows]

    async def export_movements_csv(self, start: date, end: date) -> str:
        """Render the movements of an inclusive date range as CSV."""
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(EXPORT_HEADERS)
        for movement, item, user in await self.movements.list_detailed(
            start=day_bounds(start)[0], end=day_bounds(end)[1], limit=None
        ):
            reference = f"{movement.reference_type or ''} {movement.reference_number or ''}".strip()
            writer.writerow(
                [
                    movement.movement_date.isoformat(sep=" ", timespec="seconds"),
                    item.name if item else "N/A",
                    item.sku if item else "N/A",
                    movement.movement_type,
                    movement.quantity,
                    movement.unit_cost or 0,
                    movement.total_cost or 0,
                    reference,
                    movement.notes or "",
                    user.name if user else "N/A",
                ]
            )
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    async def list_categories(self) -> List[InventoryCategory]:
        return await self.categories.list()

    async def create_category(self, data: InventoryCategoryCreate) -> InventoryCategory:
        if await self.categories.get_by_name(data.name) is not None:
            raise ConflictError(f"Inventory category {data.name} already exists")
        return await self.categories.create(InventoryCategory(**data.model_dump()))

    async def list_suppliers(self) -> List[InventorySupplier]:
        return await self.suppliers.list()

    async def get_supplier(self, supplier_id: int) -> InventorySupplier:
        return await self.suppliers.get_or_raise(supplier_id)

    async def create_supplier(self, data: InventorySupplierCreate) -> InventorySupplier:
        return await self.suppliers.create(InventorySupplier(**data.model_dump()))

    async def update_supplier(self, supplier_id: int, data: InventorySupplierUpdate) -> InventorySupplier:
        supplier = await self.suppliers.get_or_raise(supplier_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(supplier, key, value)
        return await self.suppliers.update(supplier)

    async def delete_supplier(self, supplier_id: int) -> None:
        await self.suppliers.get_or_raise(supplier_id)
        await self.suppliers.delete(supplier_id)

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    async def stats(self) -> Dict[str, Any]:
        counts = await self.items.stock_counts()
        recent = await self.movements.count_since(utc_now() - timedelta(days=7))
        return {
            "totalItems": counts["total_items"],
            "lowStockItems": counts["low_stock_items"],
            "outOfStockItems": counts["out_of_stock_items"],
            "totalValue": counts["total_value"],
            "recentMovements": recent,
        }

    async def dashboard(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Build the inventory dashboard.

        Returns:
            Dictionary with a 6-month IN/OUT chart, the category distribution,
            the 10 latest movements and the 5 largest stock shortfalls
        """
        now = now or utc_now()
        months = last_months(now, 6)
        since = month_bounds(*months[0])[0]

        totals: Dict[Tuple[int, int, str], int] = {}
        for movement in await self.movements.list_since(since):
            key = (movement.movement_date.year, movement.movement_date.month, movement.movement_type)
            totals[key] = totals.get(key, 0) + abs(movement.quantity)
        chart = [
            {
                "month": MONTH_NAMES[month - 1],
                "year": year,
                "stockIn": totals.get((year, month, MovementType.stock_in.value), 0),
                "stockOut": totals.get((year, month, MovementType.stock_out.value), 0),
            }
            for year, month in months
        ]

        distribution = await self.items.category_distribution()
        overall = sum(row["total_value"] for row in distribution)
        categories = [
            {
                "category": row["category"],
                "itemCount": row["item_count"],
                "totalValue": row["total_value"],
                "share": round(row["total_value"] / overall * 100) if overall else 0,
            }
            for row in distribution
        ]

        recent = [
            _movement_read(*row).model_dump() for row in await self.movements.list_detailed(limit=10)
        ]
        alerts = [
            {
                "id": item.id,
                "name": item.name,
                "sku": item.sku,
                "category": item.category,
                "current_stock": item.current_stock,
                "min_stock_level": item.min_stock_level,
                "shortfall": item.min_stock_level - item.current_stock,
            }
            for item in await self.items.low_stock_alerts(5)
        ]
        return {
            "chartData": chart,
            "categoryData": categories,
            "recentActivities": recent,
            "lowStockAlerts": alerts,
        }
