from abc import ABC, abstractmethod

from .exceptions import (
    ResultsStoreError,
    QueryFailed,
    UnknownTable,
    UnknownAggregate,
    MalformedResult,
)


# =========================
# ResultsStore Interface
# =========================

class ResultsStore(ABC):
    """
    Read-only view over persisted game results.

    Invariants:
    - Nothing here writes to `game_results`; the game backend is the sole writer
    - Every read either returns a non-negative number or raises a StoreError
    - Reads are independent; no two calls share a snapshot
    """

    # -------------------------------------------------
    # Counts
    # -------------------------------------------------

    @abstractmethod
    async def count_rows(
        self,
        table: str,
        *,
        owner_id: str | None = None,
        win: bool | None = None,
    ) -> int:
        """Count rows in `table`, optionally filtered by owner and/or win flag.

        A filter left as None is not applied.

        Raises:
            UnknownTable: If `table` is not a readable results table.
            QueryFailed: If the underlying query errors.
            MalformedResult: If the count comes back as anything but an int >= 0.
        """

    # -------------------------------------------------
    # Named aggregates
    # -------------------------------------------------

    @abstractmethod
    async def sum_aggregate(self, name: str) -> float:
        """Run a named server-side aggregate and return its single value.

        Raises:
            UnknownAggregate: If no aggregate is registered under `name`.
            QueryFailed: If the underlying query errors.
            MalformedResult: If the value is missing, non-numeric or negative.
        """
