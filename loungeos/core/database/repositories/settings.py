"""
Application settings repository.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.settings import AppSetting
from .base import SQLModelRepository


class AppSettingRepository(SQLModelRepository[AppSetting]):
    """Repository for JSON-encoded settings keys."""

    resource_name = "Setting"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AppSetting)

    async def load_all(self) -> Dict[str, Any]:
        """Load every stored key with its decoded value.

        Keys whose value is not valid JSON are skipped.
        """
        result = await self.session.execute(select(AppSetting))
        values: Dict[str, Any] = {}
        for row in result.scalars().all():
            try:
                values[row.key] = json.loads(row.value)
            except json.JSONDecodeError:
                continue
        return values

    async def replace_all(self, values: Dict[str, Any]) -> None:
        """Replace the stored settings with the given mapping."""
        await self.session.execute(delete(AppSetting))
        for key, value in values.items():
            self.session.add(AppSetting(key=key, value=json.dumps(value)))
        await self.session.commit()
