"""
Inventory entity models.

This module contains the database entities for stock keeping:

- ``InventoryItem``: a stocked article with its current level and thresholds.
- ``InventoryMovement``: an append-only record of every stock change. Priced
  movements are also the source transactions for accounting sync.
- ``InventoryCategory`` and ``InventorySupplier``: reference data.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class InventorySupplier(Base, table=True):
    """Entity for an inventory supplier.

    Table: inventory_suppliers
    """

    __tablename__ = "inventory_suppliers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    contact_person: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, sa_type=Text)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class InventoryCategory(Base, table=True):
    """Entity for an inventory category.

    Table: inventory_categories
    """

    __tablename__ = "inventory_categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=128, unique=True, index=True)
    description: Optional[str] = Field(default=None, sa_type=Text)
    color: str = Field(default="#000000", max_length=16)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class InventoryItem(Base, table=True):
    """Entity for a stocked inventory article.

    Table: inventory_items
    """

    __tablename__ = "inventory_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    sku: str = Field(max_length=64, unique=True, index=True)
    name: str = Field(max_length=255)
    category: str = Field(max_length=128, index=True)
    description: Optional[str] = Field(default=None, sa_type=Text)
    unit: str = Field(default="pieces", max_length=32)
    min_stock_level: int = Field(default=10)
    max_stock_level: Optional[int] = Field(default=None)
    current_stock: int = Field(default=0)
    cost_per_unit: Optional[float] = Field(default=None)
    supplier_id: Optional[int] = Field(default=None, foreign_key="inventory_suppliers.id")
    image: Optional[str] = Field(default=None, max_length=512)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"InventoryItem(id={self.id}, sku={self.sku}, current_stock={self.current_stock})"


class InventoryMovement(Base, table=True):
    """Entity for a stock movement.

    Table: inventory_movements
    """

    __tablename__ = "inventory_movements"

    id: Optional[int] = Field(default=None, primary_key=True)
    item_id: int = Field(foreign_key="inventory_items.id", index=True)
    movement_type: str = Field(max_length=16, index=True)
    quantity: int = Field()
    unit_cost: Optional[float] = Field(default=None)
    total_cost: Optional[float] = Field(default=None)
    reference_number: Optional[str] = Field(default=None, max_length=128)
    reference_type: Optional[str] = Field(default=None, max_length=32)
    notes: Optional[str] = Field(default=None, sa_type=Text)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    movement_date: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
