"""
Inventory repositories.

This module provides data access operations for inventory items, stock
movements and inventory reference data (categories and suppliers), together
with the aggregates behind the inventory statistics and dashboard.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.inventory import (
    InventoryCategory,
    InventoryItem,
    InventoryMovement,
    InventorySupplier,
)
from ..entities.staff import StaffMember
from .base import SQLModelRepository


class InventoryItemRepository(SQLModelRepository[InventoryItem]):
    """Repository for inventory items."""

    resource_name = "Inventory item"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InventoryItem)

    def _default_order(self):
        return (InventoryItem.name.asc(),)  # type: ignore

    async def get_by_sku(self, sku: str) -> Optional[InventoryItem]:
        stmt = select(InventoryItem).where(InventoryItem.sku == sku)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_with_supplier(self) -> List[Tuple[InventoryItem, Optional[InventorySupplier]]]:
        """List items together with their supplier, ordered by name."""
        stmt = (
            select(InventoryItem, InventorySupplier)
            .outerjoin(InventorySupplier, InventoryItem.supplier_id == InventorySupplier.id)
            .order_by(InventoryItem.name.asc())  # type: ignore
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def get_with_supplier(self, item_id: int) -> Optional[Tuple[InventoryItem, Optional[InventorySupplier]]]:
        stmt = (
            select(InventoryItem, InventorySupplier)
            .outerjoin(InventorySupplier, InventoryItem.supplier_id == InventorySupplier.id)
            .where(InventoryItem.id == item_id)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def stock_counts(self) -> Dict[str, Any]:
        """Count items by stock level and value the stock at cost.

        Returns:
            Dictionary with total_items, low_stock_items, out_of_stock_items, total_value
        """
        total = await self.session.execute(select(func.count()).select_from(InventoryItem))
        low = await self.session.execute(
            select(func.count())
            .select_from(InventoryItem)
            .where(InventoryItem.current_stock < InventoryItem.min_stock_level, InventoryItem.current_stock > 0)
        )
        out = await self.session.execute(
            select(func.count()).select_from(InventoryItem).where(InventoryItem.current_stock <= 0)
        )
        value = await self.session.execute(
            select(
                func.coalesce(
                    func.sum(InventoryItem.current_stock * func.coalesce(InventoryItem.cost_per_unit, 0.0)), 0.0
                )
            )
        )
        return {
            "total_items": int(total.scalar_one()),
            "low_stock_items": int(low.scalar_one()),
            "out_of_stock_items": int(out.scalar_one()),
            "total_value": float(value.scalar_one()),
        }

    async def category_distribution(self) -> List[Dict[str, Any]]:
        total_value = func.coalesce(
            func.sum(InventoryItem.current_stock * func.coalesce(InventoryItem.cost_per_unit, 0.0)), 0.0
        ).label("total_value")
        stmt = (
            select(InventoryItem.category, func.count().label("item_count"), total_value)
            .group_by(InventoryItem.category)
            .order_by(total_value.desc())
        )
        result = await self.session.execute(stmt)
        return [
            {"category": row.category, "item_count": int(row.item_count), "total_value": float(row.total_value)}
            for row in result.all()
        ]

    async def low_stock_alerts(self, limit: int = 5) -> List[InventoryItem]:
        """Get the items furthest below their minimum level."""
        stmt = (
            select(InventoryItem)
            .where(InventoryItem.current_stock < InventoryItem.min_stock_level)
            .order_by((InventoryItem.min_stock_level - InventoryItem.current_stock).desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class InventoryMovementRepository(SQLModelRepository[InventoryMovement]):
    """Repository for stock movements."""

    resource_name = "Inventory movement"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InventoryMovement)

    def _default_order(self):
        return (InventoryMovement.movement_date.desc(), InventoryMovement.id.desc())  # type: ignore

    async def list_detailed(
        self,
        item_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = 100,
    ) -> List[Tuple[InventoryMovement, Optional[InventoryItem], Optional[StaffMember]]]:
        """List movements joined with their item and the acting user.

        Args:
            item_id: Restrict to one inventory item
            start: Inclusive lower bound on movement_date
            end: Exclusive upper bound on movement_date
            limit: Maximum records to return (None for all)

        Returns:
            (movement, item, user) triples, newest first
        """
        stmt = (
            select(InventoryMovement, InventoryItem, StaffMember)
            .outerjoin(InventoryItem, InventoryMovement.item_id == InventoryItem.id)
            .outerjoin(StaffMember, InventoryMovement.user_id == StaffMember.id)
        )
        if item_id is not None:
            stmt = stmt.where(InventoryMovement.item_id == item_id)
        if start is not None:
            stmt = stmt.where(InventoryMovement.movement_date >= start)
        if end is not None:
            stmt = stmt.where(InventoryMovement.movement_date < end)
        stmt = stmt.order_by(*self._default_order())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]

    async def delete_for_item(self, item_id: int) -> None:
        await self.session.execute(delete(InventoryMovement).where(InventoryMovement.item_id == item_id))
        await self.session.flush()

    async def count_since(self, since: datetime) -> int:
        stmt = select(func.count()).select_from(InventoryMovement).where(InventoryMovement.movement_date >= since)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def out_cost(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> float:
        """Sum quantity × unit cost over OUT movements in a window."""
        stmt = select(
            func.coalesce(
                func.sum(InventoryMovement.quantity * func.coalesce(InventoryMovement.unit_cost, 0.0)), 0.0
            )
        ).where(InventoryMovement.movement_type == "OUT")
        if start is not None:
            stmt = stmt.where(InventoryMovement.movement_date >= start)
        if end is not None:
            stmt = stmt.where(InventoryMovement.movement_date < end)
        result = await self.session.execute(stmt)
        return float(result.scalar_one())

    async def list_costed(self) -> List[InventoryMovement]:
        """List movements carrying a positive unit cost, oldest first."""
        stmt = (
            select(InventoryMovement)
            .where(InventoryMovement.unit_cost > 0)
            .order_by(InventoryMovement.movement_date.asc(), InventoryMovement.id.asc())  # type: ignore
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_since(self, since: datetime) -> List[InventoryMovement]:
        stmt = select(InventoryMovement).where(InventoryMovement.movement_date >= since)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class InventoryCategoryRepository(SQLModelRepository[InventoryCategory]):
    """Repository for inventory categories."""

    resource_name = "Inventory category"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InventoryCategory)

    def _default_order(self):
        return (InventoryCategory.name.asc(),)  # type: ignore

    async def get_by_name(self, name: str) -> Optional[InventoryCategory]:
        stmt = select(InventoryCategory).where(InventoryCategory.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()


class InventorySupplierRepository(SQLModelRepository[InventorySupplier]):
    """Repository for inventory suppliers."""

    resource_name = "Inventory supplier"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, InventorySupplier)

    def _default_order(self):
        return (InventorySupplier.name.asc(),)  # type: ignore
