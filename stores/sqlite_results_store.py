import logging
import math
import sqlite3

import aiosqlite

from .exceptions import (
    QueryFailed,
    UnknownTable,
    UnknownAggregate,
    MalformedResult,
)
from .results_store import ResultsStore

logger = logging.getLogger(__name__)

GAME_RESULTS_TABLE = "game_results"

# Tables count_rows may touch. Table names can't be bound as parameters.
READABLE_TABLES = frozenset({GAME_RESULTS_TABLE})

# Named aggregates, each a query returning exactly one row with one column.
AGGREGATES = {
    "get_total_sweeping_time": "SELECT COALESCE(SUM(time_seconds), 0) FROM game_results",
}


def _check_count(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedResult(f"Expected a non-negative count, got {value!r}")
    return value


def _check_number(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResult(f"Expected a non-negative number, got {value!r}")
    # SUM over huge REAL values overflows to inf
    if (isinstance(value, float) and not math.isfinite(value)) or value < 0:
        raise MalformedResult(f"Expected a non-negative number, got {value!r}")
    return value


class SqliteResultsStore(ResultsStore):
    """SQLite-based implementation of ResultsStore."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.db: aiosqlite.Connection = None
        logger.info(f"[STORE] SqliteResultsStore initialized with db_path: {db_path}")

    async def init(self):
        """Initialize database connection. Call this after construction."""
        self.db = await aiosqlite.connect(
            self.db_path,
            timeout=30.0,
        )
        await self.db.execute("PRAGMA journal_mode=DELETE")
        self.db.row_factory = aiosqlite.Row
        logger.info(f"[STORE] Database connection established to {self.db_path}")

    async def close(self):
        """Close database connection."""
        if self.db:
            await self.db.close()
            self.db = None

    async def _fetch_scalar(self, sql: str, params: tuple = ()):
        if self.db is None:
            raise QueryFailed("Results store is not initialized; call init() first")
        try:
            async with self.db.execute(sql, params) as cursor:
                row = await cursor.fetchone()
        except (sqlite3.Error, ValueError) as exc:
            # aiosqlite raises ValueError once the connection is closed
            raise QueryFailed(str(exc)) from exc
        if row is None:
            raise MalformedResult(f"Query returned no rows: {sql}")
        return row[0]

    # -------------------------------------------------
    # Counts
    # -------------------------------------------------

    async def count_rows(
        self,
        table: str,
        *,
        owner_id: str | None = None,
        win: bool | None = None,
    ) -> int:
        if table not in READABLE_TABLES:
            raise UnknownTable(table)

        clauses = []
        params = []
        if owner_id is not None:
            clauses.append("user_id = ?")
            params.append(owner_id)
        if win is not None:
            clauses.append("win = ?")
            params.append(1 if win else 0)

        sql = f"SELECT COUNT(*) FROM {table}"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)

        return _check_count(await self._fetch_scalar(sql, tuple(params)))

    # -------------------------------------------------
    # Named aggregates
    # -------------------------------------------------

    async def sum_aggregate(self, name: str) -> float:
        sql = AGGREGATES.get(name)
        if sql is None:
            raise UnknownAggregate(name)
        return _check_number(await self._fetch_scalar(sql))
