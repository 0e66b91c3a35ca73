"""
Accounting repositories.

This module provides data access operations for the chart of accounts and
journal entries, including the ledger aggregates behind the financial
reports. Report queries only consider posted entries.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Set

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.accounting import ChartOfAccount, JournalEntry, JournalEntryLine
from .base import AsyncQueryBuilder, SQLModelRepository

CASH_ACCOUNT_CODE = "1000"


class ChartOfAccountRepository(SQLModelRepository[ChartOfAccount]):
    """Repository for ledger accounts."""

    resource_name = "Account"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ChartOfAccount)

    def _default_order(self):
        return (ChartOfAccount.code.asc(),)  # type: ignore

    async def get_by_code(self, code: str) -> Optional[ChartOfAccount]:
        stmt = select(ChartOfAccount).where(ChartOfAccount.code == code)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_active(self) -> List[ChartOfAccount]:
        return await self.list(filters={"is_active": True})


class JournalEntryRepository(SQLModelRepository[JournalEntry]):
    """Repository for journal entries and their lines."""

    resource_name = "Journal entry"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, JournalEntry)

    def _default_order(self):
        return (JournalEntry.entry_date.desc(), JournalEntry.id.desc())  # type: ignore

    async def search(
        self,
        filters: Optional[Dict[str, Any]] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[JournalEntry]:
        """List entries matching equality filters and an inclusive date range.

        Args:
            filters: Field filters (entry_type, status, reference)
            start: First entry date included
            end: Last entry date included
        """
        stmt = select(JournalEntry)
        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, JournalEntry, filters)
        if start is not None:
            stmt = stmt.where(JournalEntry.entry_date >= start)
        if end is not None:
            stmt = stmt.where(JournalEntry.entry_date <= end)
        stmt = stmt.order_by(*self._default_order())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    async def get_lines(self, entry_id: int) -> List[JournalEntryLine]:
        stmt = select(JournalEntryLine).where(JournalEntryLine.journal_entry_id == entry_id)
        stmt = stmt.order_by(JournalEntryLine.id.asc())  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add_line(self, line: JournalEntryLine) -> JournalEntryLine:
        self.session.add(line)
        await self.session.flush()
        return line

    async def delete_lines(self, entry_id: int) -> None:
        await self.session.execute(delete(JournalEntryLine).where(JournalEntryLine.journal_entry_id == entry_id))
        await self.session.flush()

    # ------------------------------------------------------------------
    # Sync bookkeeping
    # ------------------------------------------------------------------

    async def references_with_prefix(self, prefix: str) -> Set[str]:
        """Get every entry reference starting with ``prefix``."""
        stmt = select(JournalEntry.reference).where(JournalEntry.reference.startswith(prefix))  # type: ignore
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    # ------------------------------------------------------------------
    # Report aggregates
    # ------------------------------------------------------------------

    async def account_totals(
        self,
        account_types: Sequence[str],
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        """Sum debits and credits per account over posted entries.

        Args:
            account_types: Account types to include
            start: First entry date included
            end: Last entry date included

        Returns:
            Rows with code, name, account_type, debit, credit ordered by code
        """
        debit = func.coalesce(func.sum(JournalEntryLine.debit), 0.0).label("debit")
        credit = func.coalesce(func.sum(JournalEntryLine.credit), 0.0).label("credit")
        stmt = (
            select(ChartOfAccount.code, ChartOfAccount.name, ChartOfAccount.account_type, debit, credit)
            .join(JournalEntryLine, JournalEntryLine.account_code == ChartOfAccount.code)
            .join(JournalEntry, JournalEntry.id == JournalEntryLine.journal_entry_id)
            .where(ChartOfAccount.account_type.in_(account_types), JournalEntry.status != "draft")  # type: ignore
        )
        if start is not None:
            stmt = stmt.where(JournalEntry.entry_date >= start)
        if end is not None:
            stmt = stmt.where(JournalEntry.entry_date <= end)
        stmt = stmt.group_by(ChartOfAccount.code, ChartOfAccount.name, ChartOfAccount.account_type)
        stmt = stmt.order_by(ChartOfAccount.code.asc())  # type: ignore
        result = await self.session.execute(stmt)
        return [
            {
                "code": row.code,
                "name": row.name,
                "account_type": row.account_type,
                "debit": float(row.debit),
                "credit": float(row.credit),
            }
            for row in result.all()
        ]

    async def cash_movements(self, start: date, end: date) -> List[Dict[str, Any]]:
        """Net cash (debit − credit on the cash account) grouped by line description."""
        amount = func.sum(JournalEntryLine.debit - JournalEntryLine.credit).label("amount")
        stmt = (
            select(JournalEntryLine.description, amount)
            .join(JournalEntry, JournalEntry.id == JournalEntryLine.journal_entry_id)
            .where(
                JournalEntryLine.account_code == CASH_ACCOUNT_CODE,
                JournalEntry.status != "draft",
                JournalEntry.entry_date >= start,
                JournalEntry.entry_date <= end,
            )
            .group_by(JournalEntryLine.description)
            .order_by(JournalEntryLine.description.asc())  # type: ignore
        )
        result = await self.session.execute(stmt)
        return [{"description": row.description, "amount": float(row.amount or 0.0)} for row in result.all()]

    async def cash_balance_before(self, before: date) -> float:
        stmt = (
            select(func.coalesce(func.sum(JournalEntryLine.debit - JournalEntryLine.credit), 0.0))
            .join(JournalEntry, JournalEntry.id == JournalEntryLine.journal_entry_id)
            .where(
                JournalEntryLine.account_code == CASH_ACCOUNT_CODE,
                JournalEntry.status != "draft",
                JournalEntry.entry_date < before,
            )
        )
        result = await self.session.execute(stmt)
        return float(result.scalar_one())
