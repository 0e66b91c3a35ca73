"""
Accounting ledger service.

Journal entries follow double-entry rules: each entry has at least two
lines, and its debits equal its credits within a cent. ``total_amount`` is
Σ max(debit, credit) over the lines.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.base import utc_now
from loungeos.core.database.entities.accounting import ChartOfAccount, JournalEntry, JournalEntryLine
from loungeos.core.database.repositories.accounting import (
    CASH_ACCOUNT_CODE,
    ChartOfAccountRepository,
    JournalEntryRepository,
)
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.errors import ConflictError, InvalidOperationError, NotFoundError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import AccountType, EntryType, JournalStatus
from loungeos.core.models.io.accounting import (
    AccountCreate,
    ExpenseCreate,
    JournalEntryCreate,
    JournalEntryRead,
    JournalEntryUpdate,
    JournalLineIn,
    JournalLineRead,
)

logger = get_logger(__name__)

BALANCE_TOLERANCE = 0.01


class LedgerService:
    """Service for the chart of accounts, journal entries and expenses."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.accounts = ChartOfAccountRepository(session)
        self.entries = JournalEntryRepository(session)
        self.activity = ActivityLogRepository(session)

    # ------------------------------------------------------------------
    # Chart of accounts
    # ------------------------------------------------------------------

    async def list_accounts(self) -> List[ChartOfAccount]:
        return await self.accounts.list_active()

    async def add_account(self, data: AccountCreate) -> ChartOfAccount:
        if await self.accounts.get_by_code(data.code) is not None:
            raise ConflictError(f"Account code {data.code} already exists")
        account = ChartOfAccount(
            code=data.code,
            name=data.name,
            account_type=data.account_type.value,
            parent_code=data.parent_code,
        )
        return await self.accounts.create(account)

    # ------------------------------------------------------------------
    # Journal entries
    # ------------------------------------------------------------------

    async def _resolve_lines(self, lines: Sequence[JournalLineIn]) -> List[Tuple[JournalLineIn, ChartOfAccount]]:
        """Validate lines and look up their accounts.

        Raises:
            InvalidOperationError: For fewer than two lines or unbalanced lines
            NotFoundError: For an unknown account code
        """
        if len(lines) < 2:
            raise InvalidOperationError("A journal entry needs at least two lines")
        debits = sum(line.debit for line in lines)
        credits = sum(line.credit for line in lines)
        if abs(debits - credits) > BALANCE_TOLERANCE:
            raise InvalidOperationError("Debits must equal credits")

        resolved = []
        for line in lines:
            account = await self.accounts.get_by_code(line.account_code)
            if account is None:
                raise NotFoundError("Account", line.account_code)
            resolved.append((line, account))
        return resolved

    async def post_entry(
        self,
        *,
        entry_date: date,
        description: str,
        lines: Sequence[JournalLineIn],
        entry_type: EntryType = EntryType.general,
        reference: str = "",
        status: JournalStatus = JournalStatus.draft,
        created_by: Optional[int] = None,
    ) -> JournalEntry:
        """
        Stage a balanced journal entry and its lines in the current transaction.

        The caller commits.
        """
        resolved = await self._resolve_lines(lines)
        entry = JournalEntry(
            entry_date=entry_date,
            entry_type=entry_type.value,
            description=description,
            reference=reference,
            total_amount=round(sum(max(line.debit, line.credit) for line in lines), 2),
            status=status.value,
            created_by=created_by,
        )
        await self.entries.add(entry)
        for line, account in resolved:
            await self.entries.add_line(
                JournalEntryLine(
                    journal_entry_id=entry.id,
                    account_code=account.code,
                    account_name=account.name,
                    description=line.description or description,
                    debit=line.debit,
                    credit=line.credit,
                )
            )
        return entry

    async def create_entry(self, data: JournalEntryCreate) -> JournalEntryRead:
        try:
            entry = await self.post_entry(
                entry_date=data.entry_date,
                description=data.description,
                lines=data.lines,
                entry_type=data.entry_type,
                reference=data.reference,
                status=data.status,
                created_by=data.created_by,
            )
            await self.activity.record(
                data.created_by, "FIN_JOURNAL_CREATE", f"Journal entry {data.description} ({entry.total_amount:.2f})"
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Created journal entry {entry.id} ({entry.status})")
        return await self.get_entry(entry.id)

    async def list_entries(
        self,
        entry_type: Optional[EntryType] = None,
        status: Optional[JournalStatus] = None,
        reference: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[JournalEntry]:
        filters = {
            "entry_type": entry_type.value if entry_type else None,
            "status": status.value if status else None,
            "reference": reference,
        }
        return await self.entries.search(filters, start=start, end=end)

    async def get_entry(self, entry_id: int) -> JournalEntryRead:
        entry = await self.entries.get_or_raise(entry_id)
        read = JournalEntryRead.model_validate(entry)
        read.lines = [JournalLineRead.model_validate(line) for line in await self.entries.get_lines(entry_id)]
        return read

    async def update_entry(self, entry_id: int, data: JournalEntryUpdate, actor_id: Optional[int] = None) -> JournalEntryRead:
        entry = await self.entries.get_or_raise(entry_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in changes.items():
            setattr(entry, key, value.value if isinstance(value, JournalStatus) else value)
        entry.updated_at = utc_now()
        try:
            self.session.add(entry)
            await self.activity.record(actor_id, "JOURNAL_ENTRY_UPDATE", f"Updated journal entry {entry_id}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return await self.get_entry(entry_id)

    async def delete_entry(self, entry_id: int, actor_id: Optional[int] = None) -> None:
        entry = await self.entries.get_or_raise(entry_id)
        try:
            await self.entries.delete_lines(entry_id)
            await self.entries.remove(entry)
            await self.activity.record(actor_id, "JOURNAL_ENTRY_DELETE", f"Deleted journal entry {entry_id}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------

    async def list_expenses(self, start: Optional[date] = None, end: Optional[date] = None) -> List[JournalEntryRead]:
        entries = await self.entries.search({"entry_type": EntryType.expense.value}, start=start, end=end)
        return [await self.get_entry(entry.id) for entry in entries]

    async def record_expense(self, data: ExpenseCreate) -> JournalEntryRead:
        """
        Post a cash expense: Dr expense account / Cr Cash.

        Raises:
            InvalidOperationError: If the account is not an expense account
        """
        account = await self.accounts.get_by_code(data.account_code)
        if account is None:
            raise NotFoundError("Account", data.account_code)
        if account.account_type != AccountType.expense.value:
            raise InvalidOperationError(f"Account {data.account_code} is not an expense account")

        lines = [
            JournalLineIn(account_code=account.code, description=data.description, debit=data.amount),
            JournalLineIn(account_code=CASH_ACCOUNT_CODE, description=data.description, credit=data.amount),
        ]
        try:
            entry = await self.post_entry(
                entry_date=data.expense_date,
                description=data.description,
                lines=lines,
                entry_type=EntryType.expense,
                reference=data.reference or "",
                status=JournalStatus.posted,
                created_by=data.created_by,
            )
            await self.activity.record(
                data.created_by, "EXPENSE_CREATE", f"Expense {data.description} ({data.amount:.2f})"
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return await self.get_entry(entry.id)
