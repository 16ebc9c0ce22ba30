# Abstractions
from .results_store import ResultsStore
from .auth_store import AuthStore

# Exceptions
from .exceptions import (
    StoreError,
    ResultsStoreError,
    QueryFailed,
    UnknownTable,
    UnknownAggregate,
    MalformedResult,
    AuthStoreError,
    SessionNotFound,
    UserNotFound,
)

# Concrete implementations are private; only abstract interfaces are exported.
from .sqlite_results_store import SqliteResultsStore as _SqliteResultsStore, GAME_RESULTS_TABLE
from .sqlite_auth_store import SqliteAuthStore as _SqliteAuthStore

__all__ = [
    # Abstractions
    "ResultsStore",
    "AuthStore",
    "GAME_RESULTS_TABLE",
    # Exceptions
    "StoreError",
    "ResultsStoreError",
    "QueryFailed",
    "UnknownTable",
    "UnknownAggregate",
    "MalformedResult",
    "AuthStoreError",
    "SessionNotFound",
    "UserNotFound",
    # Lifecycle
    "init_stores",
    "close_stores",
    "get_results_store",
    "get_auth_store",
]


# Runtime singletons and initialization helpers
from typing import Optional

from db import ensure_db

results_store: Optional[ResultsStore] = None
auth_store: Optional[AuthStore] = None


async def init_stores(db_path: str) -> None:
    """Open the module-level store singletons for this process.

    Creates the database from `db/schema.sql` first if the file is missing.
    Safe to call more than once; stores that are already open are kept.
    """
    global results_store, auth_store

    await ensure_db(db_path)

    if results_store is None:
        store = _SqliteResultsStore(db_path)
        await store.init()
        results_store = store

    if auth_store is None:
        store = _SqliteAuthStore(db_path)
        await store.init()
        auth_store = store


async def close_stores() -> None:
    """Close and forget the module-level stores."""
    global results_store, auth_store

    if results_store is not None:
        await results_store.close()
        results_store = None
    if auth_store is not None:
        await auth_store.close()
        auth_store = None


def get_results_store() -> ResultsStore:
    """FastAPI dependency returning the process-wide results store."""
    if results_store is None:
        raise RuntimeError("Results store not initialized; call init_stores() first")
    return results_store


def get_auth_store() -> AuthStore:
    """FastAPI dependency returning the process-wide auth store."""
    if auth_store is None:
        raise RuntimeError("Auth store not initialized; call init_stores() first")
    return auth_store
