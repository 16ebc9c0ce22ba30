"""
Home page usage statistics.

Three independent reads against the results store: total play time (a named
aggregate), games started (all rows) and games completed (winning rows).
They run concurrently and are not snapshot-consistent with each other.
A failed read is logged and reported as zero.
"""

import asyncio
import logging

from models import StatsSummary
from stores import ResultsStore, GAME_RESULTS_TABLE
from .reads import attempt_read, describe_failure

logger = logging.getLogger(__name__)

TOTAL_TIME_AGGREGATE = "get_total_sweeping_time"


async def compute_stats(store: ResultsStore, *, log: logging.Logger = logger) -> StatsSummary:
	total_seconds, started, completed = await asyncio.gather(
		attempt_read(store.sum_aggregate(TOTAL_TIME_AGGREGATE)),
		attempt_read(store.count_rows(GAME_RESULTS_TABLE), integral=True),
		attempt_read(store.count_rows(GAME_RESULTS_TABLE, win=True), integral=True),
	)

	for label, result in (
		("total sweeping time", total_seconds),
		("started count", started),
		("completed count", completed),
	):
		if not result.ok:
			log.error(f"[STATS] Error fetching {label}: {describe_failure(result)}")

	return StatsSummary(
		started=started.value_or(0),
		completed=completed.value_or(0),
		seconds=total_seconds.value_or(0),
	)
