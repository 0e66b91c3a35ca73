"""
Order repository.

This module provides data access operations for orders and their lines,
including the aggregates behind order statistics, the dashboard and staff
performance.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import case, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.menu import Product
from ..entities.orders import Order, OrderItem
from .base import SQLModelRepository


class OrderRepository(SQLModelRepository[Order]):
    """Repository for order data access operations using SQLModel."""

    resource_name = "Order"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    def _default_order(self):
        return (Order.timestamp.desc(),)  # type: ignore

    # ------------------------------------------------------------------
    # Order lines
    # ------------------------------------------------------------------

    async def get_items(self, order_id: str) -> List[OrderItem]:
        stmt = select(OrderItem).where(OrderItem.order_id == order_id).order_by(OrderItem.id.asc())  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_items_for_orders(self, order_ids: Sequence[str]) -> Dict[str, List[OrderItem]]:
        """Get the lines of several orders in one query.

        Args:
            order_ids: Order identifiers

        Returns:
            Mapping of order id to its lines (orders without lines map to [])
        """
        grouped: Dict[str, List[OrderItem]] = {order_id: [] for order_id in order_ids}
        if not order_ids:
            return grouped
        stmt = select(OrderItem).where(OrderItem.order_id.in_(order_ids)).order_by(OrderItem.id.asc())  # type: ignore
        result = await self.session.execute(stmt)
        for item in result.scalars().all():
            grouped.setdefault(item.order_id, []).append(item)
        return grouped

    async def add_item(self, item: OrderItem) -> OrderItem:
        self.session.add(item)
        await self.session.flush()
        return item

    async def delete_items(self, order_id: str) -> None:
        """Stage the deletion of every line of an order."""
        await self.session.execute(delete(OrderItem).where(OrderItem.order_id == order_id))
        await self.session.flush()

    async def list_by_statuses(self, statuses: Sequence[str]) -> List[Order]:
        stmt = select(Order).where(Order.status.in_(statuses)).order_by(Order.timestamp.asc())  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    async def count(self, statuses: Optional[Sequence[str]] = None) -> int:
        stmt = select(func.count()).select_from(Order)
        if statuses:
            stmt = stmt.where(Order.status.in_(statuses))  # type: ignore
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def sum_totals(self, status: str) -> float:
        """Sum the ``total`` column of every order in a status."""
        stmt = select(func.coalesce(func.sum(Order.total), 0.0)).where(Order.status == status)
        result = await self.session.execute(stmt)
        return float(result.scalar_one())

    async def completed_item_revenue(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> float:
        """Sum quantity × price over lines of completed orders.

        Args:
            start: Inclusive lower bound on the order timestamp
            end: Exclusive upper bound on the order timestamp
        """
        stmt = (
            select(func.coalesce(func.sum(OrderItem.quantity * OrderItem.price), 0.0))
            .join(Order, OrderItem.order_id == Order.id)
            .where(Order.status == "Completed")
        )
        if start is not None:
            stmt = stmt.where(Order.timestamp >= start)
        if end is not None:
            stmt = stmt.where(Order.timestamp < end)
        result = await self.session.execute(stmt)
        return float(result.scalar_one())

    async def recent_completed(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Get the most recent completed orders with their line count."""
        stmt = (
            select(Order, func.count(OrderItem.id))
            .outerjoin(OrderItem, OrderItem.order_id == Order.id)
            .where(Order.status == "Completed")
            .group_by(Order.id)
            .order_by(Order.timestamp.desc())  # type: ignore
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "id": order.id,
                "table": order.table_name,
                "amount": order.total,
                "item_count": int(item_count),
                "timestamp": order.timestamp,
            }
            for order, item_count in result.all()
        ]

    async def top_products(self, limit: int = 5) -> List[Dict[str, Any]]:
        """Get the best-selling products across completed orders."""
        total_sold = func.sum(OrderItem.quantity).label("total_sold")
        stmt = (
            select(
                Product.id,
                Product.name,
                Product.category,
                Product.image,
                total_sold,
                func.sum(OrderItem.quantity * OrderItem.price).label("total_revenue"),
            )
            .join(OrderItem, OrderItem.product_id == Product.id)
            .join(Order, OrderItem.order_id == Order.id)
            .where(Order.status == "Completed", OrderItem.item_type == "product")
            .group_by(Product.id)
            .order_by(total_sold.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "id": row.id,
                "name": row.name,
                "category": row.category,
                "image": row.image,
                "total_sold": int(row.total_sold or 0),
                "total_revenue": float(row.total_revenue or 0.0),
            }
            for row in result.all()
        ]

    async def completed_lines_since(self, since: datetime) -> List[Dict[str, Any]]:
        """Get (timestamp, order id, line amount) rows of completed orders since a moment."""
        stmt = (
            select(Order.id, Order.timestamp, (OrderItem.quantity * OrderItem.price).label("amount"))
            .join(OrderItem, OrderItem.order_id == Order.id)
            .where(Order.status == "Completed", Order.timestamp >= since)
        )
        result = await self.session.execute(stmt)
        return [{"order_id": row.id, "timestamp": row.timestamp, "amount": float(row.amount)} for row in result.all()]

    async def waiter_performance(self) -> List[Dict[str, Any]]:
        """Aggregate orders per waiter.

        Returns:
            Rows with waiter_id, orders_processed, completed_orders, total_revenue
        """
        completed = func.sum(case((Order.status == "Completed", 1), else_=0))
        revenue = func.sum(case((Order.status == "Completed", Order.total), else_=0.0))
        stmt = (
            select(
                Order.waiter_id,
                func.count(Order.id).label("orders_processed"),
                completed.label("completed_orders"),
                revenue.label("total_revenue"),
            )
            .where(Order.waiter_id != None)  # noqa: E711
            .group_by(Order.waiter_id)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "waiter_id": row.waiter_id,
                "orders_processed": int(row.orders_processed),
                "completed_orders": int(row.completed_orders or 0),
                "total_revenue": float(row.total_revenue or 0.0),
            }
            for row in result.all()
        ]

    async def list_completed(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[Order]:
        """List completed orders, oldest first, within an optional [start, end) window."""
        stmt = select(Order).where(Order.status == "Completed")
        if start is not None:
            stmt = stmt.where(Order.timestamp >= start)
        if end is not None:
            stmt = stmt.where(Order.timestamp < end)
        stmt = stmt.order_by(Order.timestamp.asc())  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
