"""
Menu entity models.

This module contains the database entities for menu categories and the
products (meals and drinks) sold at the point of sale. A category's
``is_food`` flag routes its products to the kitchen board; everything else
goes to the bar.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class MenuCategory(Base, table=True):
    """Entity for a menu category.

    Table: categories
    """

    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=128, unique=True, index=True)
    is_food: bool = Field(default=False)


class Product(Base, table=True):
    """Entity for a sellable product.

    Table: products
    """

    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    price: float = Field(default=0.0)
    category: str = Field(max_length=128, index=True)
    image: Optional[str] = Field(default=None, max_length=512)
    quantity: int = Field(default=0)

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name}, quantity={self.quantity})"
