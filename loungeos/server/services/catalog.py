"""
Menu and supplier catalog service.

Covers menu categories, products and the menu-side suppliers. Category names
are unique; products reference their category by name.
"""

from __future__ import annotations

from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.entities.menu import MenuCategory, Product
from loungeos.core.database.entities.suppliers import Supplier
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.menu import MenuCategoryRepository, ProductRepository
from loungeos.core.database.repositories.suppliers import SupplierRepository
from loungeos.core.errors import ConflictError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.io.menu import CategoryCreate, CategoryUpdate, ProductCreate, ProductUpdate
from loungeos.core.models.io.suppliers import SupplierCreate, SupplierUpdate

logger = get_logger(__name__)


def _apply(entity: Union[MenuCategory, Product, Supplier], changes: dict) -> None:
    for key, value in changes.items():
        setattr(entity, key, value)


class CatalogService:
    """Service for menu categories, products and suppliers."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.categories = MenuCategoryRepository(session)
        self.products = ProductRepository(session)
        self.suppliers = SupplierRepository(session)
        self.activity = ActivityLogRepository(session)

    # Categories

    async def list_categories(self) -> List[MenuCategory]:
        return await self.categories.list()

    async def create_category(self, data: CategoryCreate) -> MenuCategory:
        if await self.categories.get_by_name(data.name) is not None:
            raise ConflictError(f"Category {data.name} already exists")
        return await self.categories.create(MenuCategory(name=data.name, is_food=data.is_food))

    async def update_category(self, category_id: int, data: CategoryUpdate) -> MenuCategory:
        category = await self.categories.get_or_raise(category_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes and changes["name"] != category.name:
            if await self.categories.get_by_name(changes["name"]) is not None:
                raise ConflictError(f"Category {changes['name']} already exists")
        _apply(category, changes)
        return await self.categories.update(category)

    async def delete_category(self, category_id: int) -> None:
        category = await self.categories.get_or_raise(category_id)
        await self.categories.delete(category.id)

    # Products

    async def list_products(self, category: Optional[str] = None) -> List[Product]:
        return await self.products.list(filters={"category": category})

    async def get_product(self, product_id: int) -> Product:
        return await self.products.get_or_raise(product_id)

    async def create_product(self, data: ProductCreate, actor_id: Optional[int] = None) -> Product:
        try:
            product = await self.products.add(Product(**data.model_dump()))
            await self.activity.record(actor_id, "PRODUCT_CREATE", f"Created product {product.name}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        product = await self.products.get_or_raise(product_id)
        _apply(product, data.model_dump(exclude_unset=True, exclude_none=True))
        return await self.products.update(product)

    async def set_stock(self, product_id: int, quantity: int) -> Product:
        """Overwrite a product's stock count."""
        product = await self.products.get_or_raise(product_id)
        product.quantity = quantity
        return await self.products.update(product)

    async def delete_product(self, product_id: int, actor_id: Optional[int] = None) -> None:
        product = await self.products.get_or_raise(product_id)
        try:
            await self.products.remove(product)
            await self.activity.record(actor_id, "PRODUCT_DELETE", f"Deleted product {product.name}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    # Suppliers

    async def list_suppliers(self) -> List[Supplier]:
        return await self.suppliers.list()

    async def get_supplier(self, supplier_id: int) -> Supplier:
        return await self.suppliers.get_or_raise(supplier_id)

    async def create_supplier(self, data: SupplierCreate) -> Supplier:
        return await self.suppliers.create(Supplier(**data.model_dump()))

    async def update_supplier(self, supplier_id: int, data: SupplierUpdate) -> Supplier:
        supplier = await self.suppliers.get_or_raise(supplier_id)
        _apply(supplier, data.model_dump(exclude_unset=True))
        return await self.suppliers.update(supplier)

    async def delete_supplier(self, supplier_id: int) -> None:
        await self.suppliers.get_or_raise(supplier_id)
        await self.suppliers.delete(supplier_id)
