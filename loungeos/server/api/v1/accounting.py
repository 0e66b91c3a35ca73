"""
Accounting API Endpoints.

This module covers the double-entry ledger (chart of accounts, journal
entries, expenses), the sync that posts sales and stock movements into the
journal, and the financial reports built on posted entries.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, status

from loungeos.core.database.base import utc_now
from loungeos.core.errors import InvalidOperationError
from loungeos.core.models.domain import EntryType, JournalStatus
from loungeos.core.models.io.accounting import (
    AccountCreate,
    AccountRead,
    ExpenseCreate,
    JournalEntryCreate,
    JournalEntryRead,
    JournalEntryUpdate,
    SyncAllResult,
    SyncResult,
    SyncStatus,
)
from loungeos.server.services.deps import ActorDep, LedgerServiceDep, ReportServiceDep, SyncServiceDep

router = APIRouter()


def _check_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise InvalidOperationError("end_date must not be before start_date")


# Chart of accounts


@router.get(
    "/chart-of-accounts",
    response_model=List[AccountRead],
    summary="List Accounts",
    description="List active accounts ordered by code.",
)
async def list_accounts(ledger: LedgerServiceDep) -> List[AccountRead]:
    return [AccountRead.model_validate(account) for account in await ledger.list_accounts()]


@router.post(
    "/chart-of-accounts",
    response_model=AccountRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Account",
    responses={409: {"description": "Account code already exists"}},
)
async def add_account(data: AccountCreate, ledger: LedgerServiceDep) -> AccountRead:
    return AccountRead.model_validate(await ledger.add_account(data))


# Journal entries


@router.get(
    "/journal-entries",
    response_model=List[JournalEntryRead],
    summary="List Journal Entries",
    description="List entries by entry date, newest first. Lines are not included.",
)
async def list_entries(
    ledger: LedgerServiceDep,
    entry_type: Optional[EntryType] = None,
    status: Optional[JournalStatus] = None,
    reference: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[JournalEntryRead]:
    _check_range(start_date, end_date)
    entries = await ledger.list_entries(entry_type, status, reference, start_date, end_date)
    return [JournalEntryRead.model_validate(entry) for entry in entries]


@router.post(
    "/journal-entries",
    response_model=JournalEntryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Journal Entry",
    description="Create a balanced journal entry with its lines.",
    responses={
        400: {"description": "Fewer than two lines, or debits do not equal credits"},
        404: {"description": "Unknown account code"},
    },
)
async def create_entry(data: JournalEntryCreate, ledger: LedgerServiceDep) -> JournalEntryRead:
    """
    Create a journal entry.

    - Debits and credits must balance within 0.01.
    - `total_amount` is the sum of max(debit, credit) over the lines.
    - The entry is a draft unless another status is given; drafts stay out of reports.
    """
    return await ledger.create_entry(data)


@router.get(
    "/journal-entries/{entry_id}",
    response_model=JournalEntryRead,
    summary="Get Journal Entry",
    responses={404: {"description": "Journal entry not found"}},
)
async def get_entry(entry_id: int, ledger: LedgerServiceDep) -> JournalEntryRead:
    return await ledger.get_entry(entry_id)


@router.put(
    "/journal-entries/{entry_id}",
    response_model=JournalEntryRead,
    summary="Update Journal Entry",
    description="Update the date, description, reference or status of an entry. Lines cannot be changed.",
    responses={404: {"description": "Journal entry not found"}},
)
async def update_entry(
    entry_id: int, data: JournalEntryUpdate, ledger: LedgerServiceDep, actor_id: ActorDep
) -> JournalEntryRead:
    return await ledger.update_entry(entry_id, data, actor_id)


@router.delete(
    "/journal-entries/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Journal Entry",
    responses={404: {"description": "Journal entry not found"}},
)
async def delete_entry(entry_id: int, ledger: LedgerServiceDep, actor_id: ActorDep) -> None:
    await ledger.delete_entry(entry_id, actor_id)


# Expenses


@router.get(
    "/expenses",
    response_model=List[JournalEntryRead],
    summary="List Expenses",
    description="List expense entries with their lines within an optional inclusive date range.",
)
async def list_expenses(
    ledger: LedgerServiceDep, start_date: Optional[date] = None, end_date: Optional[date] = None
) -> List[JournalEntryRead]:
    _check_range(start_date, end_date)
    return await ledger.list_expenses(start_date, end_date)


@router.post(
    "/expenses",
    response_model=JournalEntryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Expense",
    description="Post a cash expense: debit the expense account, credit 1000 Cash.",
    responses={
        400: {"description": "The account is not an expense account"},
        404: {"description": "Unknown account code"},
    },
)
async def record_expense(data: ExpenseCreate, ledger: LedgerServiceDep) -> JournalEntryRead:
    return await ledger.record_expense(data)


# Sync


@router.post(
    "/sync",
    response_model=SyncAllResult,
    summary="Sync All Transactions",
    description="Post journal entries for completed orders and costed stock movements not yet in the ledger.",
)
async def sync_all(
    sync: SyncServiceDep, start_date: Optional[date] = None, end_date: Optional[date] = None
) -> SyncAllResult:
    """
    Sync sales and inventory into the journal.

    The date window only restricts the orders considered. Running the sync
    twice posts nothing new.
    """
    _check_range(start_date, end_date)
    return await sync.sync_all(start_date, end_date)


@router.post("/sync/sales", response_model=SyncResult, summary="Sync Sales")
async def sync_sales(
    sync: SyncServiceDep, start_date: Optional[date] = None, end_date: Optional[date] = None
) -> SyncResult:
    _check_range(start_date, end_date)
    return await sync.sync_sales(start_date, end_date)


@router.post("/sync/inventory", response_model=SyncResult, summary="Sync Inventory Movements")
async def sync_inventory(sync: SyncServiceDep) -> SyncResult:
    return await sync.sync_inventory()


@router.get(
    "/sync/status",
    response_model=SyncStatus,
    summary="Sync Status",
    description="Count the completed orders and costed movements not yet in the ledger.",
)
async def sync_status(sync: SyncServiceDep) -> SyncStatus:
    return await sync.status()


# Reports


@router.get(
    "/reports/profit-loss",
    summary="Profit and Loss",
    description="Revenue and expense account balances over an inclusive date range.",
)
async def profit_loss(reports: ReportServiceDep, start_date: date, end_date: date):
    _check_range(start_date, end_date)
    return await reports.profit_loss(start_date, end_date)


@router.get(
    "/reports/balance-sheet",
    summary="Balance Sheet",
    description="Asset, liability and equity balances as of a date (today by default).",
)
async def balance_sheet(reports: ReportServiceDep, as_of_date: Optional[date] = None):
    return await reports.balance_sheet(as_of_date or utc_now().date())


@router.get(
    "/reports/cash-flow",
    summary="Cash Flow",
    description="Movements of the cash account over an inclusive date range.",
)
async def cash_flow(reports: ReportServiceDep, start_date: date, end_date: date):
    _check_range(start_date, end_date)
    return await reports.cash_flow(start_date, end_date)


@router.get(
    "/dashboard",
    summary="Accounting Dashboard",
    description="Current versus previous month revenue, expenses and profit with a 6-month chart.",
)
async def accounting_dashboard(reports: ReportServiceDep):
    return await reports.accounting_dashboard()
