"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker, seed_defaults

# Create global engine and session factory
engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates any missing table from the ORM metadata and seeds the default
    chart of accounts. Deployments managed by Alembic get the same schema
    from the initial revision; ``create_all`` skips tables that already exist.
    """
    await create_all(engine)
    async with async_session_maker() as session:
        await seed_defaults(session)
