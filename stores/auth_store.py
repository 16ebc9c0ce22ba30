from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from models import Session

from .exceptions import (
    AuthStoreError,
    SessionNotFound,
    UserNotFound,
)


# =========================
# AuthStore Interface
# =========================

class AuthStore(ABC):
    """
    The AuthStore is the sole authority over visitor sessions.

    Invariants:
    - Session tokens are unique and time-limited
    - A session belongs to exactly one existing user
    - Expired sessions are never reported as current
    """

    @abstractmethod
    async def create_user(self, user_id: str) -> None:
        """Create a user record. Creating an existing user is a no-op."""

    @abstractmethod
    async def create_session_token(
        self,
        session_token: str,
        *,
        user_id: str,
        expires_at: datetime,
    ) -> None:
        """Create or replace a session token for `user_id`.

        Raises:
            UserNotFound: If the user does not exist.
        """

    @abstractmethod
    async def get_current_session(
        self,
        session_token: str,
    ) -> Optional[Session]:
        """Return {"visitor_id": ...} for a live session, or None.

        Unknown and expired tokens both return None; expired tokens are
        deleted as a side effect.
        """

    @abstractmethod
    async def invalidate_session(
        self,
        session_token: str,
    ) -> None:
        """Explicitly revoke a session (logout).

        Raises:
            SessionNotFound: If the session token is not found.
        """

    @abstractmethod
    async def delete_expired_sessions(self) -> int:
        """Cleanup task. Deletes expired sessions, returns count."""
