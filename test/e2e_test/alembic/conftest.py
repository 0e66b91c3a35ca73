"""Fixtures for Alembic migration tests."""

from io import StringIO
from pathlib import Path

import pytest
from alembic.config import Config

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def make_alembic_config(url: str, output_buffer=None) -> Config:
    """Build an Alembic config for the project scripts without the ini logging setup."""
    config = Config(output_buffer=output_buffer)
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", url)
    return config


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Path of a throwaway SQLite database file."""
    return tmp_path / "migration.db"


@pytest.fixture
def alembic_config(database_path: Path) -> Config:
    """Alembic config pointing at the throwaway database."""
    return make_alembic_config(f"sqlite+aiosqlite:///{database_path}")


@pytest.fixture
def sql_output() -> StringIO:
    return StringIO()


@pytest.fixture
def offline_config(database_path: Path, sql_output: StringIO) -> Config:
    """Alembic config capturing the SQL emitted in offline mode."""
    return make_alembic_config(f"sqlite+aiosqlite:///{database_path}", output_buffer=sql_output)
