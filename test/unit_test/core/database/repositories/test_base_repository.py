"""Unit tests for the generic SQLModel repository.

Tests repository operations with a mocked database session to check the
commit and flush contract without a real database.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlmodel import select

from loungeos.core.database.entities.inventory import InventoryItem
from loungeos.core.database.repositories.base import AsyncQueryBuilder
from loungeos.core.database.repositories.inventory import InventoryItemRepository
from loungeos.core.errors import NotFoundError


@pytest.mark.asyncio
class TestSQLModelRepository:
    """Tests for the commit/flush split of the base repository."""

    @pytest.fixture
    def repository(self, mock_session):
        return InventoryItemRepository(mock_session)

    async def test_create_commits(self, repository, mock_session):
        entity = MagicMock()
        result = await repository.create(entity)

        mock_session.add.assert_called_once_with(entity)
        mock_session.commit.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(entity)
        assert result is entity

    async def test_add_only_flushes(self, repository, mock_session):
        entity = MagicMock()
        await repository.add(entity)

        mock_session.add.assert_called_once_with(entity)
        mock_session.flush.assert_awaited_once()
        mock_session.commit.assert_not_awaited()

    async def test_remove_only_flushes(self, repository, mock_session):
        entity = MagicMock()
        await repository.remove(entity)

        mock_session.delete.assert_awaited_once_with(entity)
        mock_session.flush.assert_awaited_once()
        mock_session.commit.assert_not_awaited()

    async def test_delete_missing_returns_false(self, repository, mock_session):
        mock_session.get = AsyncMock(return_value=None)
        assert await repository.delete(99) is False
        mock_session.commit.assert_not_awaited()

    async def test_get_or_raise(self, repository, mock_session):
        mock_session.get = AsyncMock(return_value=None)
        with pytest.raises(NotFoundError) as exc_info:
            await repository.get_or_raise(42)
        assert exc_info.value.message == "Inventory item not found: 42"

    async def test_get_many_empty(self, repository, mock_session):
        assert await repository.get_many([]) == []
        mock_session.execute.assert_not_called()


class TestAsyncQueryBuilder:
    def test_filters_skip_none_and_unknown(self):
        stmt = AsyncQueryBuilder.apply_filters(
            select(InventoryItem), InventoryItem, {"category": "Beverages", "sku": None, "bogus": 1}
        )
        sql = str(stmt)
        assert "inventory_items.category = " in sql
        assert "inventory_items.sku =" not in sql

    def test_pagination(self):
        stmt = AsyncQueryBuilder.apply_pagination(select(InventoryItem), 5, 10)
        sql = str(stmt)
        assert "LIMIT" in sql
        assert "OFFSET" in sql
