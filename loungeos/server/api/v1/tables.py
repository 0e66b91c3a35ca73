"""
Dining Table API Endpoints.

Tables reference their floor by name on input and return it by name on
output. New tables start Available.
"""

from typing import List

from fastapi import APIRouter, status

from loungeos.core.models.io.floors import TableCreate, TableRead, TableStats, TableUpdate
from loungeos.server.services.deps import FloorPlanServiceDep

router = APIRouter()


@router.get("", response_model=List[TableRead], summary="List Tables", description="List tables with their floor name.")
async def list_tables(service: FloorPlanServiceDep) -> List[TableRead]:
    return await service.list_tables()


@router.get(
    "/stats",
    response_model=TableStats,
    summary="Table Occupancy",
    description="Count tables by status. `activeTables` reads as `occupied / total`.",
)
async def table_stats(service: FloorPlanServiceDep) -> TableStats:
    return await service.table_stats()


@router.post(
    "",
    response_model=TableRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Table",
    responses={
        404: {"description": "Floor not found"},
        409: {"description": "A table with this name already exists"},
    },
)
async def create_table(data: TableCreate, service: FloorPlanServiceDep) -> TableRead:
    return await service.create_table(data)


@router.put(
    "/{table_id}",
    response_model=TableRead,
    summary="Update Table",
    responses={404: {"description": "Table or floor not found"}},
)
async def update_table(table_id: int, data: TableUpdate, service: FloorPlanServiceDep) -> TableRead:
    return await service.update_table(table_id, data)


@router.delete(
    "/{table_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Table",
    responses={404: {"description": "Table not found"}},
)
async def delete_table(table_id: int, service: FloorPlanServiceDep) -> None:
    await service.delete_table(table_id)
