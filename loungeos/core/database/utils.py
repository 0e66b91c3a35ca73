"""
Database utility functions for engine and session management.

Functions:
- async_database_url: Rewrites sqlite URLs to the aiosqlite driver
- create_engine: Creates the async SQLAlchemy engine
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- seed_defaults: Inserts the default chart of accounts and backup schedule
"""

from __future__ import annotations

import re

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import select

from loungeos.core.logging_config import get_logger

from . import entities  # noqa: F401  registers every table on the metadata
from .base import Base
from .entities.accounting import ChartOfAccount
from .entities.backups import BackupSettings

logger = get_logger(__name__)

# (code, name, account_type)
DEFAULT_CHART_OF_ACCOUNTS = [
    ("1000", "Cash", "asset"),
    ("1100", "Accounts Receivable", "asset"),
    ("1200", "Inventory", "asset"),
    ("1300", "Prepaid Expenses", "asset"),
    ("1400", "Equipment", "asset"),
    ("1500", "Accumulated Depreciation", "asset"),
    ("2000", "Accounts Payable", "liability"),
    ("2100", "Accrued Expenses", "liability"),
    ("2200", "Loans Payable", "liability"),
    ("2300", "Taxes Payable", "liability"),
    ("3000", "Owner's Equity", "equity"),
    ("3100", "Retained Earnings", "equity"),
    ("3900", "Current Year Earnings", "equity"),
    ("4000", "Sales Revenue", "revenue"),
    ("4100", "Service Revenue", "revenue"),
    ("4200", "Other Revenue", "revenue"),
    ("5000", "Cost of Goods Sold", "expense"),
    ("5100", "Salaries & Wages", "expense"),
    ("5200", "Rent Expense", "expense"),
    ("5300", "Utilities", "expense"),
    ("5400", "Supplies", "expense"),
    ("5500", "Depreciation", "expense"),
    ("5600", "Marketing & Advertising", "expense"),
    ("5900", "Miscellaneous Expenses", "expense"),
]


def async_database_url(db_url: str) -> str:
    """Point plain ``sqlite://`` URLs at the ``aiosqlite`` driver."""
    return re.sub(r"^sqlite(?:\+[a-z0-9_]+)?://", "sqlite+aiosqlite://", db_url, count=1)


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    return create_async_engine(async_database_url(db_url), pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_defaults(session: AsyncSession) -> None:
    """Insert the default chart of accounts and the backup schedule row.

    Existing account codes are left untouched, so seeding is idempotent.

    Args:
        session: Async session used for the inserts
    """
    result = await session.execute(select(ChartOfAccount.code))
    existing = set(result.scalars().all())
    missing = [row for row in DEFAULT_CHART_OF_ACCOUNTS if row[0] not in existing]
    for code, name, account_type in missing:
        session.add(ChartOfAccount(code=code, name=name, account_type=account_type))

    if await session.get(BackupSettings, 1) is None:
        session.add(BackupSettings(id=1))

    await session.commit()
    if missing:
        logger.info(f"Seeded {len(missing)} default ledger accounts")
