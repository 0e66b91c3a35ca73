"""
Menu repositories.

Data access for menu categories and products, including the lookup of food
categories used to route order lines to the kitchen board.
"""

from __future__ import annotations

from typing import Optional, Set

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.menu import MenuCategory, Product
from .base import SQLModelRepository


class MenuCategoryRepository(SQLModelRepository[MenuCategory]):
    """Repository for menu categories."""

    resource_name = "Category"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MenuCategory)

    def _default_order(self):
        return (MenuCategory.name.asc(),)  # type: ignore

    async def get_by_name(self, name: str) -> Optional[MenuCategory]:
        stmt = select(MenuCategory).where(MenuCategory.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def food_category_names(self) -> Set[str]:
        """Get the names of all categories prepared by the kitchen."""
        stmt = select(MenuCategory.name).where(MenuCategory.is_food == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return set(result.scalars().all())


class ProductRepository(SQLModelRepository[Product]):
    """Repository for products sold at the point of sale."""

    resource_name = "Product"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    def _default_order(self):
        return (Product.name.asc(),)  # type: ignore
