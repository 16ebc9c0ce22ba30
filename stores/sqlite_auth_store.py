from datetime import datetime
import logging
import sqlite3

import aiosqlite

from models import Session
from utils.time import now_utc, to_iso, parse_iso
from .auth_store import AuthStore
from .exceptions import (
    UserNotFound,
    SessionNotFound,
)

logger = logging.getLogger(__name__)


class SqliteAuthStore(AuthStore):
    """SQLite-based implementation of AuthStore."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.db: aiosqlite.Connection = None

    async def init(self):
        """Initialize database connection. Call this after construction."""
        self.db = await aiosqlite.connect(
            self.db_path,
            timeout=30.0
        )
        # DELETE journal mode avoids WAL locking issues on Docker volume mounts
        await self.db.execute("PRAGMA journal_mode=DELETE")
        await self.db.execute("PRAGMA foreign_keys=ON")
        self.db.row_factory = aiosqlite.Row

    async def close(self):
        """Close database connection."""
        if self.db:
            await self.db.close()
            self.db = None

    # -------------------------------------------------
    # Users
    # -------------------------------------------------

    async def create_user(self, user_id: str) -> None:
        await self.db.execute(
            "INSERT OR IGNORE INTO users (user_id, created_at) VALUES (?, ?)",
            (user_id, to_iso(now_utc())),
        )
        await self.db.commit()

    # -------------------------------------------------
    # Session management
    # -------------------------------------------------

    async def create_session_token(
        self,
        session_token: str,
        *,
        user_id: str,
        expires_at: datetime,
    ) -> None:
        """Create or update a session token.

        If the session token already exists it is rebound to `user_id` with
        the new expiration.

        Raises:
            UserNotFound: If the user does not exist.
        """
        cur = await self.db.execute("SELECT 1 FROM users WHERE user_id = ?", (user_id,))
        if await cur.fetchone() is None:
            raise UserNotFound(f"User {user_id} not found")

        try:
            await self.db.execute(
                """
                INSERT OR REPLACE INTO session_tokens (session_token, user_id, expires_at)
                VALUES (?, ?, ?)
                """,
                (session_token, user_id, to_iso(expires_at)),
            )
            await self.db.commit()
        except sqlite3.IntegrityError as exc:
            # user deleted between the check and the insert
            await self.db.rollback()
            raise UserNotFound(f"User {user_id} not found") from exc

    async def get_current_session(
        self,
        session_token: str,
    ) -> Session | None:
        """Return {"visitor_id"} for a live session, or None if expired/not found.

        Expired tokens are cleaned up on the way out.
        """
        cur = await self.db.execute(
            """
            SELECT user_id, expires_at
            FROM session_tokens
            WHERE session_token = ?
            """,
            (session_token,),
        )
        row = await cur.fetchone()
        if not row:
            return None

        user_id, expires_at = row[0], row[1]

        expires_dt = parse_iso(expires_at)
        if expires_dt is None or expires_dt < now_utc():
            logger.info("[STORE] Removing expired session token")
            await self.db.execute(
                "DELETE FROM session_tokens WHERE session_token = ?",
                (session_token,),
            )
            await self.db.commit()
            return None

        # close the implicit read transaction
        await self.db.commit()

        return Session(visitor_id=user_id)

    async def invalidate_session(
        self,
        session_token: str,
    ) -> None:
        """Explicitly revoke a session (logout).

        Raises:
            SessionNotFound: If the session token is not found.
        """
        cur = await self.db.execute(
            "DELETE FROM session_tokens WHERE session_token = ?",
            (session_token,),
        )
        await self.db.commit()
        if cur.rowcount == 0:
            raise SessionNotFound("Session token not found")

    async def delete_expired_sessions(self) -> int:
        """Cleanup task. Deletes expired sessions, returns count."""
        # ISO8601 UTC strings with the same offset sort chronologically
        cur = await self.db.execute(
            "DELETE FROM session_tokens WHERE expires_at < ?",
            (to_iso(now_utc()),),
        )
        await self.db.commit()
        return cur.rowcount
