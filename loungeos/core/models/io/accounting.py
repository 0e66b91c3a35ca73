"""
Accounting I/O models for API requests and responses.

This module contains the schemas for the chart of accounts, journal entries,
expenses and the accounting sync results.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from loungeos.core.models.domain import AccountType, EntryType, JournalStatus


class AccountRead(BaseModel):
    id: int
    code: str
    name: str
    account_type: str
    parent_code: Optional[str] = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class AccountCreate(BaseModel):
    code: str = Field(min_length=1, max_length=16)
    name: str = Field(min_length=1)
    account_type: AccountType
    parent_code: Optional[str] = None


class JournalLineIn(BaseModel):
    account_code: str
    description: str = ""
    debit: float = Field(default=0.0, ge=0.0)
    credit: float = Field(default=0.0, ge=0.0)


class JournalLineRead(BaseModel):
    id: int
    account_code: str
    account_name: str
    description: str
    debit: float
    credit: float

    model_config = ConfigDict(from_attributes=True)


class JournalEntryRead(BaseModel):
    """Schema for reading a journal entry; ``lines`` is filled on single-entry reads."""

    id: int
    entry_date: date
    entry_type: str
    description: str
    reference: str
    total_amount: float
    status: str
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    lines: List[JournalLineRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class JournalEntryCreate(BaseModel):
    """Schema for creating a balanced journal entry."""

    entry_date: date
    entry_type: EntryType = EntryType.general
    description: str = Field(min_length=1)
    reference: str = ""
    status: JournalStatus = JournalStatus.draft
    created_by: Optional[int] = None
    lines: List[JournalLineIn]


class JournalEntryUpdate(BaseModel):
    entry_date: Optional[date] = None
    description: Optional[str] = None
    reference: Optional[str] = None
    status: Optional[JournalStatus] = None


class ExpenseCreate(BaseModel):
    """Schema for recording a cash expense (Dr expense account / Cr Cash)."""

    description: str = Field(min_length=1)
    amount: float = Field(gt=0.0)
    account_code: str = Field(description="Expense account code (e.g., '5300')")
    expense_date: date = Field(alias="date")
    reference: Optional[str] = None
    created_by: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)


class SyncResult(BaseModel):
    synced: int
    total: int


class SyncAllResult(BaseModel):
    sales: SyncResult
    inventory: SyncResult
    total_synced: int
    total_available: int


class SyncStatus(BaseModel):
    unsynced_orders: int
    unsynced_inventory: int
    total_unsynced: int
