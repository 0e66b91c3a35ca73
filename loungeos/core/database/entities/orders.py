"""
Order entity models.

This module contains the database entities for point-of-sale orders and
their lines. Order identifiers are human-readable strings
(``ORD-{epoch-ms}-{suffix}``). A line references either a product or an
inventory item, distinguished by ``item_type``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field

from ..base import Base, utc_now


class Order(Base, table=True):
    """Entity for a customer order.

    Table: orders
    """

    __tablename__ = "orders"

    id: str = Field(primary_key=True, max_length=64)
    table_name: str = Field(max_length=128, index=True)
    status: str = Field(default="Pending", max_length=32, index=True)
    timestamp: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)

    # Financials
    subtotal: float = Field(default=0.0)
    discount: float = Field(default=0.0)
    discount_name: Optional[str] = Field(default=None, max_length=128)
    tax: float = Field(default=0.0)
    total: float = Field(default=0.0)

    waiter_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)

    # Cancellation audit
    cancelled_by: Optional[int] = Field(default=None, foreign_key="users.id")
    cancellation_reason: Optional[str] = Field(default=None, max_length=512)
    cancelled_at: Optional[datetime] = Field(default=None, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"Order(id={self.id}, table={self.table_name}, status={self.status}, total={self.total})"


class OrderItem(Base, table=True):
    """Entity for a single order line.

    Table: order_items
    """

    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: str = Field(foreign_key="orders.id", max_length=64, index=True)
    product_id: int = Field(index=True)
    quantity: int = Field(default=1)
    price: float = Field(default=0.0)
    item_type: str = Field(default="product", max_length=32)
