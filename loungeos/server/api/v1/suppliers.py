"""
Supplier API Endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from loungeos.core.models.io.suppliers import SupplierCreate, SupplierRead, SupplierUpdate
from loungeos.server.services.deps import CatalogServiceDep

router = APIRouter()


@router.get("", response_model=List[SupplierRead], summary="List Suppliers")
async def list_suppliers(service: CatalogServiceDep) -> List[SupplierRead]:
    return [SupplierRead.model_validate(supplier) for supplier in await service.list_suppliers()]


@router.get(
    "/{supplier_id}",
    response_model=SupplierRead,
    summary="Get Supplier",
    responses={404: {"description": "Supplier not found"}},
)
async def get_supplier(supplier_id: int, service: CatalogServiceDep) -> SupplierRead:
    return SupplierRead.model_validate(await service.get_supplier(supplier_id))


@router.post("", response_model=SupplierRead, status_code=status.HTTP_201_CREATED, summary="Create Supplier")
async def create_supplier(data: SupplierCreate, service: CatalogServiceDep) -> SupplierRead:
    return SupplierRead.model_validate(await service.create_supplier(data))


@router.put(
    "/{supplier_id}",
    response_model=SupplierRead,
    summary="Update Supplier",
    responses={404: {"description": "Supplier not found"}},
)
async def update_supplier(supplier_id: int, data: SupplierUpdate, service: CatalogServiceDep) -> SupplierRead:
    return SupplierRead.model_validate(await service.update_supplier(supplier_id, data))


@router.delete(
    "/{supplier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Supplier",
    responses={404: {"description": "Supplier not found"}},
)
async def delete_supplier(supplier_id: int, service: CatalogServiceDep) -> None:
    await service.delete_supplier(supplier_id)
