"""
Menu I/O models for API requests and responses.

Categories carry the ``is_food`` flag that routes a product to the kitchen
board (food) or the bar board (everything else).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryRead(BaseModel):
    id: int
    name: str
    is_food: bool

    model_config = ConfigDict(from_attributes=True)


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    is_food: bool = False


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    is_food: Optional[bool] = None


class ProductRead(BaseModel):
    """Schema for reading a menu product."""

    id: int
    name: str
    price: float
    category: str
    image: Optional[str] = None
    quantity: int = Field(description="Units in stock")

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(ge=0.0)
    category: str
    image: Optional[str] = None
    quantity: int = Field(default=0)


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0.0)
    category: Optional[str] = None
    image: Optional[str] = None
    quantity: Optional[int] = None


class StockUpdate(BaseModel):
    product_id: int
    quantity: int
