"""Tests for SessionRepository: query methods against real SQLite DB."""

from datetime import datetime, timedelta

import pytest

from thesis_admin.repositories.session_repo import SessionRepository

pytestmark = pytest.mark.asyncio(loop_scope="function")

NOW = datetime(2026, 3, 1, 12, 0)


async def test_get_active_returns_unexpired_session(db, admin_user):
    repo = SessionRepository(db)
    await repo.create(admin_user.id, "tok-1", NOW + timedelta(hours=1))

    session = await repo.get_active("tok-1", NOW)

    assert session is not None
    assert session.user.username == "admin"


async def test_get_active_skips_expired_session(db, admin_user):
    repo = SessionRepository(db)
    await repo.create(admin_user.id, "tok-1", NOW - timedelta(seconds=1))

    assert await repo.get_active("tok-1", NOW) is None


async def test_get_active_unknown_token(db):
    assert await SessionRepository(db).get_active("missing", NOW) is None
