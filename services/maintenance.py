"""Scheduled housekeeping jobs."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from pytz import timezone

import config
from stores import AuthStore

logger = logging.getLogger(__name__)


async def purge_expired_sessions(auth_store: AuthStore) -> int:
	"""Delete expired session tokens. Failures are logged, never raised."""
	try:
		deleted = await auth_store.delete_expired_sessions()
	except Exception as e:
		logger.error(f"[MAINTENANCE] Failed to purge expired sessions: {e}", exc_info=True)
		return 0
	logger.info(f"[MAINTENANCE] Purged {deleted} expired session(s)")
	return deleted


def create_scheduler(auth_store: AuthStore) -> AsyncIOScheduler:
	"""Build (but do not start) the scheduler running the daily session purge."""
	scheduler = AsyncIOScheduler(timezone=timezone(config.TIMEZONE))
	scheduler.add_job(
		purge_expired_sessions,
		trigger="cron",
		hour=config.SESSION_CLEANUP_HOUR,
		minute=config.SESSION_CLEANUP_MINUTE,
		args=[auth_store],
		id="purge_expired_sessions",
		replace_existing=True,
	)
	return scheduler
