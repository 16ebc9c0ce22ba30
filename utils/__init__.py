"""Utility helpers used across the project.

Exports:
- cookie helpers: `set_cookie`, `get_cookie`, `delete_cookie`,
  `read_visitation_marker`, `mark_visited`, `resolve_identity`
- time helpers: `now_utc`, `to_iso`, `parse_iso`
"""

from .cookies import (
	set_cookie,
	get_cookie,
	delete_cookie,
	read_visitation_marker,
	mark_visited,
	resolve_identity,
)
from .time import now_utc, to_iso, parse_iso

__all__ = [
	"set_cookie",
	"get_cookie",
	"delete_cookie",
	"read_visitation_marker",
	"mark_visited",
	"resolve_identity",
	"now_utc",
	"to_iso",
	"parse_iso",
]
