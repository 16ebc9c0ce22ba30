"""Home page data loader: onboarding decision plus usage stats."""

import asyncio
import logging

from models import Identity, PageData
from stores import ResultsStore
from .onboarding import resolve_show_tutorial
from .stats import compute_stats

logger = logging.getLogger(__name__)


async def load_page_data(
	identity: Identity,
	store: ResultsStore,
	*,
	log: logging.Logger = logger,
) -> PageData:
	"""Run the gate and the stats reads concurrently and combine them.

	Never raises for store failures; each part degrades on its own.
	"""
	show_tutorial, stats = await asyncio.gather(
		resolve_show_tutorial(identity, store, log=log),
		compute_stats(store, log=log),
	)
	return PageData(stats=stats, show_tutorial=show_tutorial)
