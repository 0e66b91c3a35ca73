"""
Order I/O models for API requests and responses.

This module contains the schemas for order taking, lifecycle updates,
splitting and merging, and the kitchen/bar display boards.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from loungeos.core.models.domain import OrderItemType, OrderStatus


class OrderItemIn(BaseModel):
    """A line of an order being created or replaced."""

    product_id: int = Field(description="Product id, or inventory item id when item_type is 'inventory_item'")
    item_type: OrderItemType = OrderItemType.product
    quantity: int = Field(default=1, ge=1)
    price: Optional[float] = Field(
        default=None, ge=0.0, description="Unit price; defaults to the catalog price when omitted"
    )


class OrderItemRead(BaseModel):
    id: int
    product_id: int
    item_type: str
    quantity: int
    price: float
    name: Optional[str] = Field(default=None, description="Product or inventory item name")
    category: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class OrderRead(BaseModel):
    """Schema for reading an order with its lines."""

    id: str
    table_name: str
    status: str
    timestamp: datetime
    subtotal: float
    discount: float
    discount_name: Optional[str] = None
    tax: float
    total: float
    waiter_id: Optional[int] = None
    cancelled_by: Optional[int] = None
    cancellation_reason: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    items: List[OrderItemRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class OrderCreate(BaseModel):
    """Schema for taking a new order.

    ``subtotal`` defaults to Σ price × quantity and ``total`` to
    ``subtotal + tax - discount``.
    """

    table_name: str = Field(min_length=1)
    items: List[OrderItemIn] = Field(min_length=1)
    status: OrderStatus = OrderStatus.pending
    subtotal: Optional[float] = Field(default=None, ge=0.0)
    tax: float = Field(default=0.0, ge=0.0)
    discount: float = Field(default=0.0, ge=0.0)
    discount_name: Optional[str] = None
    total: Optional[float] = Field(default=None, ge=0.0)
    waiter_id: Optional[int] = None


class OrderUpdate(BaseModel):
    """Schema for editing an order; a non-empty ``items`` list replaces the lines."""

    table_name: Optional[str] = None
    items: Optional[List[OrderItemIn]] = None
    subtotal: Optional[float] = Field(default=None, ge=0.0)
    tax: Optional[float] = Field(default=None, ge=0.0)
    discount: Optional[float] = Field(default=None, ge=0.0)
    discount_name: Optional[str] = None
    total: Optional[float] = Field(default=None, ge=0.0)
    waiter_id: Optional[int] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
    cancelled_by: Optional[int] = None
    cancellation_reason: Optional[str] = None


class SplitItem(BaseModel):
    product_id: int
    item_type: OrderItemType = OrderItemType.product
    quantity: int = Field(ge=1)


class SplitRequest(BaseModel):
    order_id: str
    items: List[SplitItem] = Field(min_length=1)


class SplitResult(BaseModel):
    updated_order: Optional[OrderRead] = Field(
        default=None, description="The original order, or null when every line was split off"
    )
    new_order: OrderRead


class MergeRequest(BaseModel):
    from_order_id: str
    to_order_id: str


class DisplayBoard(BaseModel):
    """Orders of a kitchen or bar board grouped by status column."""

    board: str = Field(description="'kitchen' or 'bar'")
    columns: Dict[str, List[OrderRead]]
