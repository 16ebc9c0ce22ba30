"""Per-read result capture for store queries that must never fail a page.

`attempt_read` turns an awaited store call into a `ReadResult`, and
`ReadResult.value_or` collapses it back into a plain value with a default.
Neither logs; callers decide how to report failures.
"""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar

from stores import MalformedResult

T = TypeVar("T")


@dataclass(frozen=True)
class ReadResult(Generic[T]):
	value: Optional[T] = None
	error: Optional[BaseException] = None

	@classmethod
	def success(cls, value: T) -> "ReadResult[T]":
		return cls(value=value)

	@classmethod
	def failure(cls, error: BaseException) -> "ReadResult[T]":
		return cls(error=error)

	@property
	def ok(self) -> bool:
		return self.error is None

	def value_or(self, default: T) -> T:
		return self.value if self.ok else default


def _usable(value: Any, integral: bool) -> bool:
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		return False
	if isinstance(value, float) and (integral or not math.isfinite(value)):
		return False
	if not integral and value > sys.float_info.max:
		return False
	return value >= 0


async def attempt_read(read: Awaitable[Any], *, integral: bool = False) -> ReadResult:
	"""Await `read` and capture its outcome.

	Any exception becomes a failure, and so does a `None`, negative or
	non-finite value, since a count or sum of nothing is zero rather than
	missing. With `integral` set, floats are rejected too.
	"""
	try:
		value = await read
	except Exception as exc:
		return ReadResult.failure(exc)
	if not _usable(value, integral):
		return ReadResult.failure(MalformedResult(f"Unusable value from store: {value!r}"))
	return ReadResult.success(value)


def describe_failure(result: ReadResult) -> str:
	"""Short human readable reason for a failed read."""
	if result.ok:
		return ""
	return f"{type(result.error).__name__}: {result.error}"
