"""
Inventory I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from loungeos.core.models.domain import MovementType, ReferenceType


class InventoryItemRead(BaseModel):
    """Schema for reading an inventory item with its derived stock status."""

    id: int
    sku: str
    name: str
    category: str
    description: Optional[str] = None
    unit: str
    min_stock_level: int
    max_stock_level: Optional[int] = None
    current_stock: int
    cost_per_unit: Optional[float] = None
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
    image: Optional[str] = None
    status: str = Field(description="In Stock, Low Stock or Out of Stock")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InventoryItemCreate(BaseModel):
    sku: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str
    description: Optional[str] = None
    unit: str = "pieces"
    min_stock_level: int = Field(default=10, ge=0)
    max_stock_level: Optional[int] = Field(default=None, ge=0)
    current_stock: int = Field(default=0, ge=0)
    cost_per_unit: Optional[float] = Field(default=None, ge=0.0)
    supplier_id: Optional[int] = None
    image: Optional[str] = None


class InventoryItemUpdate(BaseModel):
    sku: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    unit: Optional[str] = None
    min_stock_level: Optional[int] = Field(default=None, ge=0)
    max_stock_level: Optional[int] = Field(default=None, ge=0)
    current_stock: Optional[int] = Field(default=None, ge=0)
    cost_per_unit: Optional[float] = Field(default=None, ge=0.0)
    supplier_id: Optional[int] = None
    image: Optional[str] = None


class BulkItemCreate(BaseModel):
    items: List[InventoryItemCreate] = Field(min_length=1)


class MovementCreate(BaseModel):
    """Schema for recording a stock movement.

    ``quantity`` is positive for IN, OUT and TRANSFER; an ADJUSTMENT carries
    a signed quantity.
    """

    item_id: int
    movement_type: MovementType
    quantity: int
    unit_cost: Optional[float] = Field(default=None, ge=0.0)
    reference_number: Optional[str] = None
    reference_type: Optional[ReferenceType] = None
    notes: Optional[str] = None
    user_id: Optional[int] = None


class BulkMovementCreate(BaseModel):
    movements: List[MovementCreate] = Field(min_length=1)
    user_id: Optional[int] = None


class MovementRead(BaseModel):
    """Schema for reading a movement with its item and acting user."""

    id: int
    item_id: int
    item_name: Optional[str] = None
    sku: Optional[str] = None
    movement_type: str
    quantity: int
    unit_cost: Optional[float] = None
    total_cost: Optional[float] = None
    reference_number: Optional[str] = None
    reference_type: Optional[str] = None
    notes: Optional[str] = None
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    movement_date: datetime


class InventoryCategoryRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    color: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InventoryCategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    color: str = "#000000"


class InventorySupplierRead(BaseModel):
    id: int
    name: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InventorySupplierCreate(BaseModel):
    name: str = Field(min_length=1)
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class InventorySupplierUpdate(BaseModel):
    name: Optional[str] = None
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
