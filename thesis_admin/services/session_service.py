"""Session resolution: maps an opaque session token to the acting user."""

import secrets
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.models import User, UserSession
from thesis_admin.repositories.session_repo import SessionRepository

DEFAULT_SESSION_TTL = timedelta(hours=12)


def _utcnow() -> datetime:
    # Timestamps are stored as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def resolve_user(db: AsyncSession, token: str | None) -> User | None:
    """Return the user owning an unexpired session, or None."""
    if not token:
        return None
    session = await SessionRepository(db).get_active(token, _utcnow())
    if not session:
        return None
    return session.user


async def create_session(db: AsyncSession, user_id: int, ttl: timedelta = DEFAULT_SESSION_TTL) -> UserSession:
    token = secrets.token_urlsafe(32)
    return await SessionRepository(db).create(user_id, token, _utcnow() + ttl)
