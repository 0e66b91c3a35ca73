"""
Order service.

This module implements order taking and the order lifecycle on top of the
order, menu and inventory repositories. Every write runs as a single unit of
work: lines, stock changes and the activity trail are committed together or
not at all.

Order lines point either at a menu product or at an inventory item sold as
is (``item_type``). Taking an order decrements the stock of whatever each
line points at.
"""

from __future__ import annotations

import random
import string
import time
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.orders import Order, OrderItem
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.inventory import InventoryItemRepository
from loungeos.core.database.repositories.menu import MenuCategoryRepository, ProductRepository
from loungeos.core.database.repositories.orders import OrderRepository
from loungeos.core.errors import ConflictError, InvalidOperationError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import OrderItemType, OrderStatus, can_transition
from loungeos.core.models.io.orders import (
    DisplayBoard,
    OrderCreate,
    OrderItemIn,
    OrderItemRead,
    OrderRead,
    OrderStatusUpdate,
    OrderUpdate,
    SplitItem,
    SplitResult,
)

logger = get_logger(__name__)

ACTIVE_STATUSES = (OrderStatus.pending, OrderStatus.in_progress, OrderStatus.ready)
BOARD_STATUSES = ACTIVE_STATUSES + (OrderStatus.canceled,)


def generate_order_id() -> str:
    """Build an order id of the form ``ORD-{epoch-ms}-{5 upper alnum}``."""
    suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=5))
    return f"ORD-{int(time.time() * 1000)}-{suffix}"


def _line_total(items: Sequence[OrderItem]) -> float:
    return sum(item.price * item.quantity for item in items)


class OrderService:
    """Service for orders, their lines and the kitchen/bar boards."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.orders = OrderRepository(session)
        self.products = ProductRepository(session)
        self.inventory = InventoryItemRepository(session)
        self.categories = MenuCategoryRepository(session)
        self.activity = ActivityLogRepository(session)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def _describe(self, orders: Sequence[Order]) -> List[OrderRead]:
        """Attach lines, with product or inventory names, to orders."""
        lines = await self.orders.get_items_for_orders([order.id for order in orders])
        product_ids = set()
        inventory_ids = set()
        for items in lines.values():
            for item in items:
                if item.item_type == OrderItemType.inventory_item.value:
                    inventory_ids.add(item.product_id)
                else:
                    product_ids.add(item.product_id)
        products = {p.id: p for p in await self.products.get_many(sorted(product_ids))}
        stock = {i.id: i for i in await self.inventory.get_many(sorted(inventory_ids))}

        described = []
        for order in orders:
            items = []
            for item in lines.get(order.id, []):
                if item.item_type == OrderItemType.inventory_item.value:
                    source = stock.get(item.product_id)
                else:
                    source = products.get(item.product_id)
                items.append(
                    OrderItemRead(
                        id=item.id,
                        product_id=item.product_id,
                        item_type=item.item_type,
                        quantity=item.quantity,
                        price=item.price,
                        name=source.name if source else None,
                        category=source.category if source else None,
                    )
                )
            read = OrderRead.model_validate(order)
            read.items = items
            described.append(read)
        return described

    async def list_orders(self, status: Optional[OrderStatus] = None) -> List[OrderRead]:
        orders = await self.orders.list(filters={"status": status.value if status else None})
        return await self._describe(orders)

    async def get_order(self, order_id: str) -> OrderRead:
        order = await self.orders.get_or_raise(order_id)
        return (await self._describe([order]))[0]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def _build_lines(self, order_id: str, items: Sequence[OrderItemIn], take_stock: bool) -> List[OrderItem]:
        """Resolve order lines against the catalog.

        Args:
            order_id: Order receiving the lines
            items: Requested lines
            take_stock: Decrement product quantity or inventory stock

        Raises:
            NotFoundError: If a line points at an unknown product or inventory item
        """
        built = []
        for item in items:
            if item.item_type is OrderItemType.inventory_item:
                source = await self.inventory.get_or_raise(item.product_id)
                catalog_price = source.cost_per_unit or 0.0
                if take_stock:
                    source.current_stock -= item.quantity
                    source.updated_at = utc_now()
                    self.session.add(source)
            else:
                source = await self.products.get_or_raise(item.product_id)
                catalog_price = source.price
                if take_stock:
                    source.quantity -= item.quantity
                    self.session.add(source)
            built.append(
                OrderItem(
                    order_id=order_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price if item.price is not None else catalog_price,
                    item_type=item.item_type.value,
                )
            )
        return built

    async def create_order(self, data: OrderCreate, actor_id: Optional[int] = None) -> OrderRead:
        """
        Take a new order.

        The order, its lines and the stock decrements are written in one
        transaction. ``subtotal`` defaults to Σ price × quantity and ``total``
        to ``subtotal + tax - discount``.

        Raises:
            NotFoundError: If a line points at an unknown item; nothing is written
        """
        order_id = generate_order_id()
        try:
            lines = await self._build_lines(order_id, data.items, take_stock=True)
            subtotal = data.subtotal if data.subtotal is not None else _line_total(lines)
            total = data.total if data.total is not None else subtotal + data.tax - data.discount
            order = Order(
                id=order_id,
                table_name=data.table_name,
                status=data.status.value,
                subtotal=subtotal,
                discount=data.discount,
                discount_name=data.discount_name,
                tax=data.tax,
                total=total,
                waiter_id=data.waiter_id if data.waiter_id is not None else actor_id,
            )
            await self.orders.add(order)
            for line in lines:
                await self.orders.add_item(line)
            await self.activity.record(
                actor_id, "ORDER_CREATE", f"Created order {order_id} for {data.table_name} ({total:.2f})"
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Created order {order_id} with {len(lines)} lines")
        return await self.get_order(order_id)

    async def update_order(self, order_id: str, data: OrderUpdate, actor_id: Optional[int] = None) -> OrderRead:
        """
        Edit an order's table, waiter, financials and lines.

        A non-empty ``items`` list replaces the existing lines without
        touching stock. Financials are recomputed like on creation whenever
        any of them is given.
        """
        order = await self.orders.get_or_raise(order_id)
        try:
            if data.items:
                await self.orders.delete_items(order_id)
                lines = await self._build_lines(order_id, data.items, take_stock=False)
                for line in lines:
                    await self.orders.add_item(line)
            else:
                lines = await self.orders.get_items(order_id)

            if data.table_name is not None:
                order.table_name = data.table_name
            if data.waiter_id is not None:
                order.waiter_id = data.waiter_id

            financials = ("subtotal", "tax", "discount", "discount_name", "total")
            if data.items or any(field in data.model_fields_set for field in financials):
                if data.tax is not None:
                    order.tax = data.tax
                if data.discount is not None:
                    order.discount = data.discount
                if "discount_name" in data.model_fields_set:
                    order.discount_name = data.discount_name
                order.subtotal = data.subtotal if data.subtotal is not None else _line_total(lines)
                order.total = data.total if data.total is not None else order.subtotal + order.tax - order.discount

            order.timestamp = utc_now()
            self.session.add(order)
            await self.activity.record(actor_id, "ORDER_UPDATE", f"Updated order {order_id}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return await self.get_order(order_id)

    async def update_status(self, order_id: str, data: OrderStatusUpdate, actor_id: Optional[int] = None) -> OrderRead:
        """
        Move an order along its lifecycle.

        Raises:
            ConflictError: If the move is not allowed from the current status
        """
        order = await self.orders.get_or_raise(order_id)
        current = OrderStatus(order.status)
        if not can_transition(current, data.status):
            raise ConflictError(f"Cannot move order {order_id} from {current.value} to {data.status.value}")

        now = utc_now()
        order.status = data.status.value
        order.timestamp = now
        if data.status is OrderStatus.canceled:
            order.cancelled_at = now
            order.cancelled_by = data.cancelled_by if data.cancelled_by is not None else actor_id
            order.cancellation_reason = data.cancellation_reason
        try:
            self.session.add(order)
            await self.activity.record(
                actor_id, "ORDER_STATUS", f"Order {order_id}: {current.value} -> {data.status.value}"
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug(f"Order {order_id} moved from {current.value} to {data.status.value}")
        return await self.get_order(order_id)

    async def delete_order(self, order_id: str, actor_id: Optional[int] = None) -> None:
        order = await self.orders.get_or_raise(order_id)
        try:
            await self.orders.delete_items(order_id)
            await self.orders.remove(order)
            await self.activity.record(actor_id, "ORDER_DELETE", f"Deleted order {order_id}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def split_order(self, order_id: str, items: Sequence[SplitItem]) -> SplitResult:
        """
        Move part of an order's quantities to a new order on the same table.

        The new order starts Pending with ``subtotal = total`` = Σ split lines.
        The original keeps what remains and is deleted when nothing does.

        Raises:
            InvalidOperationError: For quantities above what was ordered or
                lines that are not on the order
        """
        original = await self.orders.get_or_raise(order_id)
        lines = await self.orders.get_items(order_id)

        ordered: Dict[Tuple[int, str], int] = {}
        for line in lines:
            key = (line.product_id, line.item_type)
            ordered[key] = ordered.get(key, 0) + line.quantity

        requested: Dict[Tuple[int, str], int] = {}
        for item in items:
            key = (item.product_id, item.item_type.value)
            requested[key] = requested.get(key, 0) + item.quantity
        for key, quantity in requested.items():
            if key not in ordered:
                raise InvalidOperationError(f"Item {key[0]} ({key[1]}) is not on order {order_id}")
            if quantity > ordered[key]:
                raise InvalidOperationError(
                    f"Cannot split {quantity} of item {key[0]}: only {ordered[key]} ordered"
                )

        new_id = await self._free_split_id()
        try:
            split_lines = []
            remaining = dict(requested)
            for line in lines:
                key = (line.product_id, line.item_type)
                take = min(line.quantity, remaining.get(key, 0))
                if take == 0:
                    continue
                remaining[key] -= take
                split_lines.append(
                    OrderItem(
                        order_id=new_id,
                        product_id=line.product_id,
                        quantity=take,
                        price=line.price,
                        item_type=line.item_type,
                    )
                )
                if take == line.quantity:
                    await self.orders.remove(line)
                else:
                    line.quantity -= take
                    self.session.add(line)

            split_total = _line_total(split_lines)
            await self.orders.add(
                Order(
                    id=new_id,
                    table_name=original.table_name,
                    status=OrderStatus.pending.value,
                    subtotal=split_total,
                    total=split_total,
                    waiter_id=original.waiter_id,
                )
            )
            for line in split_lines:
                await self.orders.add_item(line)

            kept = await self.orders.get_items(order_id)
            original_deleted = not kept
            if original_deleted:
                await self.orders.remove(original)
            else:
                original.subtotal = _line_total(kept)
                original.total = original.subtotal - original.discount + original.tax
                original.timestamp = utc_now()
                self.session.add(original)
            await self.activity.record(original.waiter_id, "ORDER_SPLIT", f"Split order {order_id} into {new_id}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Split order {order_id} into {new_id}")
        return SplitResult(
            updated_order=None if original_deleted else await self.get_order(order_id),
            new_order=await self.get_order(new_id),
        )

    async def _free_split_id(self) -> str:
        """Return an unused ``ORD-{epoch-ms}-SPLIT`` id, stepping past taken milliseconds."""
        stamp = int(time.time() * 1000)
        while await self.orders.get_by_id(f"ORD-{stamp}-SPLIT") is not None:
            stamp += 1
        return f"ORD-{stamp}-SPLIT"

    async def merge_orders(self, from_order_id: str, to_order_id: str) -> OrderRead:
        """
        Merge one order into another and delete the source order.

        Lines for the same (product_id, item_type) are consolidated into the
        target's existing line; the others move over unchanged.

        Raises:
            InvalidOperationError: When merging an order into itself
        """
        if from_order_id == to_order_id:
            raise InvalidOperationError("An order cannot be merged into itself")
        source = await self.orders.get_or_raise(from_order_id)
        target = await self.orders.get_or_raise(to_order_id)

        try:
            target_lines = {(line.product_id, line.item_type): line for line in await self.orders.get_items(to_order_id)}
            for line in await self.orders.get_items(from_order_id):
                existing = target_lines.get((line.product_id, line.item_type))
                if existing is not None:
                    existing.quantity += line.quantity
                    self.session.add(existing)
                    await self.orders.remove(line)
                else:
                    line.order_id = to_order_id
                    self.session.add(line)
                    target_lines[(line.product_id, line.item_type)] = line
            await self.orders.remove(source)

            target.subtotal = _line_total(await self.orders.get_items(to_order_id))
            target.total = target.subtotal - target.discount + target.tax
            target.timestamp = utc_now()
            self.session.add(target)
            await self.activity.record(
                target.waiter_id, "ORDER_MERGE", f"Merged order {from_order_id} into {to_order_id}"
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Merged order {from_order_id} into {to_order_id}")
        return await self.get_order(to_order_id)

    # ------------------------------------------------------------------
    # Statistics and boards
    # ------------------------------------------------------------------

    async def stats(self) -> dict:
        """Order counts, completed revenue, recent sales and best sellers."""
        return {
            "totalOrders": await self.orders.count(),
            "completedOrders": await self.orders.count([OrderStatus.completed.value]),
            "canceledOrders": await self.orders.count([OrderStatus.canceled.value]),
            "totalRevenue": await self.orders.sum_totals(OrderStatus.completed.value),
            "recentSales": await self.orders.recent_completed(10),
            "topSellingProducts": await self.orders.top_products(5),
        }

    async def display_board(self, board: str) -> DisplayBoard:
        """
        Build the kitchen or bar board.

        The kitchen sees only lines whose product category is a food
        category; the bar sees every other line, inventory items included.
        Orders left without a line for the board are omitted.
        """
        food = await self.categories.food_category_names()
        orders = await self.orders.list_by_statuses([status.value for status in BOARD_STATUSES])
        columns: Dict[str, List[OrderRead]] = {status.value: [] for status in BOARD_STATUSES}

        for order in await self._describe(orders):
            if board == "kitchen":
                order.items = [
                    item
                    for item in order.items
                    if item.item_type == OrderItemType.product.value and item.category in food
                ]
            else:
                order.items = [
                    item
                    for item in order.items
                    if item.item_type == OrderItemType.inventory_item.value or item.category not in food
                ]
            if order.items:
                columns[order.status].append(order)
        return DisplayBoard(board=board, columns=columns)
