"""
Floor plan repositories.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.floors import DiningTable, Floor
from .base import SQLModelRepository


class FloorRepository(SQLModelRepository[Floor]):
    """Repository for floors, addressed by name."""

    resource_name = "Floor"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Floor)

    def _default_order(self):
        return (Floor.name.asc(),)  # type: ignore

    async def get_by_name(self, name: str) -> Optional[Floor]:
        stmt = select(Floor).where(Floor.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def count_tables(self, floor_id: int) -> int:
        stmt = select(func.count()).select_from(DiningTable).where(DiningTable.floor_id == floor_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())


class DiningTableRepository(SQLModelRepository[DiningTable]):
    """Repository for dining tables."""

    resource_name = "Table"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, DiningTable)

    async def get_by_name(self, name: str) -> Optional[DiningTable]:
        stmt = select(DiningTable).where(DiningTable.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_with_floor(self) -> List[Tuple[DiningTable, Optional[str]]]:
        """List tables together with the name of their floor.

        Returns:
            (table, floor name) pairs ordered by floor then table name
        """
        stmt = (
            select(DiningTable, Floor.name)
            .outerjoin(Floor, DiningTable.floor_id == Floor.id)
            .order_by(Floor.name.asc(), DiningTable.name.asc())  # type: ignore
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def count_by_status(self, status: Optional[str] = None) -> int:
        stmt = select(func.count()).select_from(DiningTable)
        if status is not None:
            stmt = stmt.where(DiningTable.status == status)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
