"""
Centralized database layer for LoungeOS.

This package provides a unified location for all database entities and repositories,
organized by business domain.

Structure:
- entities/: Database entity models organized by table/business logic
- repositories/: Data access layer organized by table/business logic
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, seeding)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    DEFAULT_CHART_OF_ACCOUNTS,
    async_database_url,
    create_all,
    create_engine,
    create_sessionmaker,
    seed_defaults,
)

__all__ = [
    "Base",
    "DEFAULT_CHART_OF_ACCOUNTS",
    "async_database_url",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "seed_defaults",
]
