import os
from pathlib import Path

# Path to the SQLite database file used by stores. Can be overridden
# using the ZSWEEP_DB_PATH environment variable.
DB_PATH = os.environ.get("ZSWEEP_DB_PATH", str(Path(__file__).parent / "db.sqlite3"))

LOG_LEVEL = os.environ.get("ZSWEEP_LOG_LEVEL", "INFO").upper()

# Comma separated list of allowed origins for the CORS middleware.
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("ZSWEEP_CORS_ORIGINS", "https://zsweep.com").split(",")
    if origin.strip()
]

TIMEZONE = os.environ.get("ZSWEEP_TIMEZONE", "America/Toronto")

# Cookies
VISITED_COOKIE = "zsweep-visited"
SESSION_COOKIE = "zsweep-session"
VISITED_COOKIE_MAX_AGE = 365 * 24 * 60 * 60

# Session cleanup runs once a day at this local time
SESSION_CLEANUP_HOUR = 3
SESSION_CLEANUP_MINUTE = 0
