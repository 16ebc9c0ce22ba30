"""Cookie helpers for FastAPI request/response handling.

Small wrappers around FastAPI `Request` and `Response` cookie APIs, plus
identity resolution from the session and visitation-marker cookies.
"""
import logging
from typing import Optional

from fastapi import Request, Response

import config
from models import AnonymousVisitor, AuthenticatedVisitor, Identity
from stores import AuthStore

logger = logging.getLogger(__name__)


def set_cookie(response: Response, key: str, value: str, *, expires: int = 2 * 24 * 60 * 60, httponly: bool = False) -> Response:
	"""Set a cookie on the given `Response` and return it.

	`expires` is in seconds (defaults to 2 days).
	"""
	response.set_cookie(key=key, value=value, httponly=httponly, max_age=expires, expires=expires, samesite="lax")
	return response


def get_cookie(request: Request, key: str) -> Optional[str]:
	"""Return the cookie value from a `Request`, or `None` if missing."""
	return request.cookies.get(key)


def delete_cookie(response: Response, key: str) -> Response:
	"""Delete a cookie by name on the `Response` and return it."""
	response.delete_cookie(key)
	return response


def read_visitation_marker(request: Request) -> Optional[str]:
	"""Return the raw visitation marker, or None. Only presence is meaningful."""
	return get_cookie(request, config.VISITED_COOKIE)


def mark_visited(response: Response) -> Response:
	"""Set the visitation marker so later anonymous visits skip the tutorial."""
	return set_cookie(response, config.VISITED_COOKIE, "true", expires=config.VISITED_COOKIE_MAX_AGE)


async def resolve_identity(request: Request, auth_store: AuthStore) -> Identity:
	"""
	Work out who is asking for the page.

	A live session token makes an authenticated visitor. Everything else,
	including unknown or expired tokens and auth store failures, is an
	anonymous visitor described only by whether the marker was sent.
	"""
	session_token = get_cookie(request, config.SESSION_COOKIE)
	if session_token:
		try:
			session = await auth_store.get_current_session(session_token)
		except Exception as e:
			logger.error(f"Failed to look up session, treating visitor as anonymous: {e}", exc_info=True)
			session = None
		if session and session.get("visitor_id"):
			return AuthenticatedVisitor(visitor_id=session["visitor_id"])

	return AnonymousVisitor(marker_present=read_visitation_marker(request) is not None)
