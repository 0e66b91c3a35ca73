"""
Staff repository.

This module provides data access operations for staff member accounts,
keyed in practice by email address.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.staff import StaffMember
from .base import SQLModelRepository


class StaffRepository(SQLModelRepository[StaffMember]):
    """Repository for staff member data access operations using SQLModel."""

    resource_name = "Staff member"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, StaffMember)

    def _default_order(self):
        return (StaffMember.name.asc(),)  # type: ignore

    async def get_by_email(self, email: str) -> Optional[StaffMember]:
        """Get a staff member by email address.

        Args:
            email: Email address (exact match)

        Returns:
            StaffMember instance or None
        """
        stmt = select(StaffMember).where(StaffMember.email == email)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def count_by_role(self, role: str) -> int:
        stmt = select(func.count()).select_from(StaffMember).where(StaffMember.role == role)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
