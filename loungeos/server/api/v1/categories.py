"""
Menu Category API Endpoints.

A category's `is_food` flag decides whether its products show on the
kitchen board (food) or the bar board.
"""

from typing import List

from fastapi import APIRouter, status

from loungeos.core.models.io.menu import CategoryCreate, CategoryRead, CategoryUpdate
from loungeos.server.services.deps import CatalogServiceDep

router = APIRouter()


@router.get("", response_model=List[CategoryRead], summary="List Categories")
async def list_categories(service: CatalogServiceDep) -> List[CategoryRead]:
    return [CategoryRead.model_validate(category) for category in await service.list_categories()]


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    responses={409: {"description": "Category name already exists"}},
)
async def create_category(data: CategoryCreate, service: CatalogServiceDep) -> CategoryRead:
    return CategoryRead.model_validate(await service.create_category(data))


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update Category",
    responses={404: {"description": "Category not found"}, 409: {"description": "Category name already exists"}},
)
async def update_category(category_id: int, data: CategoryUpdate, service: CatalogServiceDep) -> CategoryRead:
    return CategoryRead.model_validate(await service.update_category(category_id, data))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Category",
    responses={404: {"description": "Category not found"}},
)
async def delete_category(category_id: int, service: CatalogServiceDep) -> None:
    await service.delete_category(category_id)
