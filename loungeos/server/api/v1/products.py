"""
Product API Endpoints.

Products are the meals and drinks sold at the point of sale. Their
`quantity` is the stock count decremented when orders are taken.
"""

from typing import List, Optional

from fastapi import APIRouter, status

from loungeos.core.models.io.menu import ProductCreate, ProductRead, ProductUpdate, StockUpdate
from loungeos.server.services.deps import ActorDep, CatalogServiceDep

router = APIRouter()


@router.get(
    "",
    response_model=List[ProductRead],
    summary="List Products",
    description="List products ordered by name, optionally restricted to one category.",
)
async def list_products(service: CatalogServiceDep, category: Optional[str] = None) -> List[ProductRead]:
    return [ProductRead.model_validate(product) for product in await service.list_products(category)]


@router.post(
    "/update-stock",
    response_model=ProductRead,
    summary="Set Product Stock",
    description="Overwrite the stock count of a product.",
    responses={404: {"description": "Product not found"}},
)
async def update_stock(data: StockUpdate, service: CatalogServiceDep) -> ProductRead:
    return ProductRead.model_validate(await service.set_stock(data.product_id, data.quantity))


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get Product",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: int, service: CatalogServiceDep) -> ProductRead:
    return ProductRead.model_validate(await service.get_product(product_id))


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED, summary="Create Product")
async def create_product(data: ProductCreate, service: CatalogServiceDep, actor_id: ActorDep) -> ProductRead:
    return ProductRead.model_validate(await service.create_product(data, actor_id))


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update Product",
    responses={404: {"description": "Product not found"}},
)
async def update_product(product_id: int, data: ProductUpdate, service: CatalogServiceDep) -> ProductRead:
    return ProductRead.model_validate(await service.update_product(product_id, data))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(product_id: int, service: CatalogServiceDep, actor_id: ActorDep) -> None:
    await service.delete_product(product_id, actor_id)
