"""Domain-level types used by services and stores.

`TypedDict` for the session payload the auth store hands back, frozen
dataclasses for the two visitor identities so callers dispatch on type
rather than on nullable fields.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict, Union


class Session(TypedDict):
	visitor_id: str


@dataclass(frozen=True)
class AuthenticatedVisitor:
	"""A visitor with a live session."""
	visitor_id: str


@dataclass(frozen=True)
class AnonymousVisitor:
	"""A visitor without a session; only knows whether the visitation marker was sent."""
	marker_present: bool


Identity = Union[AuthenticatedVisitor, AnonymousVisitor]


__all__ = ["Session", "AuthenticatedVisitor", "AnonymousVisitor", "Identity"]
