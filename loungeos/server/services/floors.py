"""
Floor plan service.

Tables are attached to a floor referenced by name in API payloads. A floor
cannot be removed while tables still sit on it.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.entities.floors import DiningTable, Floor
from loungeos.core.database.repositories.floors import DiningTableRepository, FloorRepository
from loungeos.core.errors import ConflictError, InvalidOperationError, NotFoundError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import TableStatus
from loungeos.core.models.io.floors import TableCreate, TableRead, TableStats, TableUpdate

logger = get_logger(__name__)


class FloorPlanService:
    """Service for floors and dining tables."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.floors = FloorRepository(session)
        self.tables = DiningTableRepository(session)

    # ------------------------------------------------------------------
    # Floors
    # ------------------------------------------------------------------

    async def list_floors(self) -> List[Floor]:
        return await self.floors.list()

    async def create_floor(self, name: str) -> Floor:
        if await self.floors.get_by_name(name) is not None:
            raise ConflictError(f"Floor {name} already exists")
        floor = await self.floors.create(Floor(name=name))
        logger.info(f"Created floor {name}")
        return floor

    async def delete_floor(self, name: str) -> None:
        floor = await self.floors.get_by_name(name)
        if floor is None:
            raise NotFoundError("Floor", name)
        if await self.floors.count_tables(floor.id) > 0:
            raise InvalidOperationError(f"Floor {name} still has tables assigned")
        await self.floors.delete(floor.id)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    async def list_tables(self) -> List[TableRead]:
        return [
            TableRead(
                id=table.id,
                name=table.name,
                capacity=table.capacity,
                status=table.status,
                floor_id=table.floor_id,
                floor=floor_name,
            )
            for table, floor_name in await self.tables.list_with_floor()
        ]

    async def _resolve_floor(self, name: str) -> Floor:
        floor = await self.floors.get_by_name(name)
        if floor is None:
            raise NotFoundError("Floor", name)
        return floor

    async def create_table(self, data: TableCreate) -> TableRead:
        floor = await self._resolve_floor(data.floor)
        if await self.tables.get_by_name(data.name) is not None:
            raise ConflictError(f"Table {data.name} already exists")
        table = await self.tables.create(
            DiningTable(
                name=data.name,
                capacity=data.capacity,
                status=TableStatus.available.value,
                floor_id=floor.id,
            )
        )
        return TableRead(
            id=table.id,
            name=table.name,
            capacity=table.capacity,
            status=table.status,
            floor_id=floor.id,
            floor=floor.name,
        )

    async def update_table(self, table_id: int, data: TableUpdate) -> TableRead:
        table = await self.tables.get_or_raise(table_id)
        floor_name = None
        if data.floor is not None:
            floor = await self._resolve_floor(data.floor)
            table.floor_id = floor.id
            floor_name = floor.name
        if data.name is not None and data.name != table.name:
            if await self.tables.get_by_name(data.name) is not None:
                raise ConflictError(f"Table {data.name} already exists")
            table.name = data.name
        if data.capacity is not None:
            table.capacity = data.capacity
        if data.status is not None:
            table.status = data.status.value
        table = await self.tables.update(table)
        if floor_name is None and table.floor_id is not None:
            floor = await self.floors.get_by_id(table.floor_id)
            floor_name = floor.name if floor else None
        return TableRead(
            id=table.id,
            name=table.name,
            capacity=table.capacity,
            status=table.status,
            floor_id=table.floor_id,
            floor=floor_name,
        )

    async def delete_table(self, table_id: int) -> None:
        if not await self.tables.delete(table_id):
            raise NotFoundError("Table", table_id)

    async def table_stats(self) -> TableStats:
        total = await self.tables.count_by_status()
        occupied = await self.tables.count_by_status(TableStatus.occupied.value)
        available = await self.tables.count_by_status(TableStatus.available.value)
        return TableStats(
            totalTables=total,
            occupiedTables=occupied,
            availableTables=available,
            activeTables=f"{occupied} / {total}",
        )
