"""
Shared exception definitions for all stores.

Hierarchy:
- StoreError (base for all store exceptions)
  - ResultsStoreError (game result read errors)
  - AuthStoreError (session/identity errors)
"""


# =========================
# Base exception
# =========================

class StoreError(Exception):
    """Base exception for all store-related errors."""
    retryable: bool = True


# =========================
# ResultsStore exceptions
# =========================

class ResultsStoreError(StoreError):
    """Base exception for results store errors."""
    retryable = True


class QueryFailed(ResultsStoreError):
    retryable = True
    # wraps driver level errors (locked database, missing table, closed connection)


class UnknownTable(ResultsStoreError):
    retryable = False


class UnknownAggregate(ResultsStoreError):
    retryable = False


class MalformedResult(ResultsStoreError):
    """The query succeeded but returned something that is not a usable number."""
    retryable = False


# =========================
# AuthStore exceptions
# =========================

class AuthStoreError(StoreError):
    """Base exception for auth store errors."""
    retryable = True


class SessionNotFound(AuthStoreError):
    retryable = False


class UserNotFound(AuthStoreError):
    retryable = False
