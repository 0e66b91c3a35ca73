"""
Accounting entity models.

This module contains the database entities for double-entry bookkeeping:

- ``ChartOfAccount``: the account catalogue (code, name, type).
- ``JournalEntry``: the header of a balanced journal entry.
- ``JournalEntryLine``: the debit/credit lines of an entry.

Entries created by the accounting sync carry a ``reference`` of
``POS-{order_id}`` or ``INV-{movement_id}`` so a source transaction is never
posted twice.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import DateTime, Field, Text

from ..base import Base, utc_now


class ChartOfAccount(Base, table=True):
    """Entity for a ledger account.

    Table: chart_of_accounts
    """

    __tablename__ = "chart_of_accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(max_length=16, unique=True, index=True)
    name: str = Field(max_length=255)
    account_type: str = Field(max_length=16, index=True)
    parent_code: Optional[str] = Field(default=None, max_length=16)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)


class JournalEntry(Base, table=True):
    """Entity for a journal entry header.

    Table: journal_entries
    """

    __tablename__ = "journal_entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    entry_date: date = Field(index=True)
    entry_type: str = Field(default="general", max_length=16, index=True)
    description: str = Field(sa_type=Text)
    reference: str = Field(default="", max_length=128, index=True)
    total_amount: float = Field(default=0.0)
    status: str = Field(default="draft", max_length=16, index=True)
    created_by: Optional[int] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"JournalEntry(id={self.id}, reference={self.reference}, total_amount={self.total_amount})"


class JournalEntryLine(Base, table=True):
    """Entity for a journal entry line.

    Table: journal_entry_lines
    """

    __tablename__ = "journal_entry_lines"

    id: Optional[int] = Field(default=None, primary_key=True)
    journal_entry_id: int = Field(foreign_key="journal_entries.id", index=True)
    account_code: str = Field(max_length=16, index=True)
    account_name: str = Field(max_length=255)
    description: str = Field(default="", sa_type=Text)
    debit: float = Field(default=0.0)
    credit: float = Field(default=0.0)
