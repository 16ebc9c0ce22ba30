"""
Onboarding gate: should this visitor see the first-run tutorial?

Authenticated visitors are first-timers when they own no game results.
Anonymous visitors are first-timers when the visitation marker cookie is
absent. The gate never sets the marker; the page route does.
"""

import logging

from models import AuthenticatedVisitor, AnonymousVisitor, Identity
from stores import ResultsStore, GAME_RESULTS_TABLE
from .reads import ReadResult, attempt_read, describe_failure

logger = logging.getLogger(__name__)


def decide_show_tutorial(identity: Identity, prior_results: ReadResult | None = None) -> bool:
	"""Pure decision.

	`prior_results` is the owned-row count read and only matters for
	authenticated visitors; only a successful read of exactly zero shows
	the tutorial.
	"""
	if isinstance(identity, AuthenticatedVisitor):
		if prior_results is None or not prior_results.ok:
			return False
		return prior_results.value == 0
	if isinstance(identity, AnonymousVisitor):
		return not identity.marker_present
	raise TypeError(f"Unsupported identity: {identity!r}")


async def resolve_show_tutorial(
	identity: Identity,
	store: ResultsStore,
	*,
	log: logging.Logger = logger,
) -> bool:
	"""Run the owned-results count when needed and decide.

	A failed count is logged and suppresses the tutorial.
	"""
	if not isinstance(identity, AuthenticatedVisitor):
		return decide_show_tutorial(identity)

	prior_results = await attempt_read(
		store.count_rows(GAME_RESULTS_TABLE, owner_id=identity.visitor_id),
		integral=True,
	)
	if not prior_results.ok:
		log.error(
			f"[ONBOARDING] Error counting results for visitor {identity.visitor_id}: "
			f"{describe_failure(prior_results)}"
		)
	return decide_show_tutorial(identity, prior_results)
