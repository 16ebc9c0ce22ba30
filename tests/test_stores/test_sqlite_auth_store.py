"""Tests for the SQLite auth store session lifecycle."""

import sqlite3
from datetime import timedelta

import pytest

from stores import SessionNotFound, UserNotFound
from utils.time import now_utc


@pytest.mark.asyncio
async def test_live_session_resolves_visitor(auth_store):
    await auth_store.create_user("U1")
    await auth_store.create_session_token("tok-1", user_id="U1", expires_at=now_utc() + timedelta(days=1))

    assert await auth_store.get_current_session("tok-1") == {"visitor_id": "U1"}


@pytest.mark.asyncio
async def test_unknown_token_is_none(auth_store):
    assert await auth_store.get_current_session("missing") is None


@pytest.mark.asyncio
async def test_expired_session_is_none_and_removed(auth_store, db_path):
    await auth_store.create_user("U1")
    await auth_store.create_session_token("old", user_id="U1", expires_at=now_utc() - timedelta(minutes=1))

    assert await auth_store.get_current_session("old") is None

    conn = sqlite3.connect(str(db_path))
    try:
        remaining = conn.execute("SELECT COUNT(*) FROM session_tokens").fetchone()[0]
    finally:
        conn.close()
    assert remaining == 0


@pytest.mark.asyncio
async def test_session_for_missing_user_rejected(auth_store):
    with pytest.raises(UserNotFound):
        await auth_store.create_session_token("tok", user_id="ghost", expires_at=now_utc() + timedelta(days=1))


@pytest.mark.asyncio
async def test_create_user_twice_is_noop(auth_store):
    await auth_store.create_user("U1")
    await auth_store.create_user("U1")
    await auth_store.create_session_token("tok", user_id="U1", expires_at=now_utc() + timedelta(days=1))

    assert await auth_store.get_current_session("tok") == {"visitor_id": "U1"}


@pytest.mark.asyncio
async def test_invalidate_session(auth_store):
    await auth_store.create_user("U1")
    await auth_store.create_session_token("tok", user_id="U1", expires_at=now_utc() + timedelta(days=1))

    await auth_store.invalidate_session("tok")

    assert await auth_store.get_current_session("tok") is None
    with pytest.raises(SessionNotFound):
        await auth_store.invalidate_session("tok")


@pytest.mark.asyncio
async def test_delete_expired_sessions_keeps_live_ones(auth_store):
    await auth_store.create_user("U1")
    await auth_store.create_session_token("old-1", user_id="U1", expires_at=now_utc() - timedelta(days=1))
    await auth_store.create_session_token("old-2", user_id="U1", expires_at=now_utc() - timedelta(hours=1))
    await auth_store.create_session_token("live", user_id="U1", expires_at=now_utc() + timedelta(hours=1))

    assert await auth_store.delete_expired_sessions() == 2
    assert await auth_store.get_current_session("live") == {"visitor_id": "U1"}
