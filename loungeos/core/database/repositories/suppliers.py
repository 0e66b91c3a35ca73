"""
Supplier repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.suppliers import Supplier
from .base import SQLModelRepository


class SupplierRepository(SQLModelRepository[Supplier]):
    """Repository for product suppliers."""

    resource_name = "Supplier"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Supplier)

    def _default_order(self):
        return (Supplier.name.asc(),)  # type: ignore
