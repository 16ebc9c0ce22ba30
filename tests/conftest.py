"""
Shared pytest fixtures for the zsweep test suite.

- Temporary SQLite databases built from db/schema.sql
- Opened SQLite stores (closed after each test)
- Helpers to seed users and game results directly, since the stores
  themselves never write game results
"""

import sqlite3
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from db import SCHEMA_PATH
from stores.sqlite_auth_store import SqliteAuthStore
from stores.sqlite_results_store import SqliteResultsStore
from tests.helpers import seed_results


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """A fresh database with the production schema and no rows."""
    path = tmp_path / "zsweep_test.db"
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA_PATH.read_text())
    finally:
        conn.close()
    return path


@pytest.fixture
def seed(db_path: Path):
    """Callable fixture: seed(rows) inserts game results into the test database."""

    def _seed(rows):
        seed_results(db_path, rows)

    return _seed


# ============================================================================
# STORE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def results_store(db_path: Path) -> AsyncGenerator[SqliteResultsStore, None]:
    store = SqliteResultsStore(str(db_path))
    await store.init()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def auth_store(db_path: Path) -> AsyncGenerator[SqliteAuthStore, None]:
    store = SqliteAuthStore(str(db_path))
    await store.init()
    yield store
    await store.close()
