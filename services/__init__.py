"""Services package: page data preparation and housekeeping jobs.

Import submodules to make them available as `services.stats`,
`services.onboarding`, etc.
"""

from .reads import ReadResult, attempt_read
from .onboarding import decide_show_tutorial, resolve_show_tutorial
from .stats import compute_stats, TOTAL_TIME_AGGREGATE
from .page import load_page_data
from .maintenance import purge_expired_sessions, create_scheduler

__all__ = [
	"ReadResult",
	"attempt_read",
	"decide_show_tutorial",
	"resolve_show_tutorial",
	"compute_stats",
	"TOTAL_TIME_AGGREGATE",
	"load_page_data",
	"purge_expired_sessions",
	"create_scheduler",
]
