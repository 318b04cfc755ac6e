"""Shared router dependencies: session resolution and role-permission checks."""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.config import settings
from thesis_admin.database import get_db
from thesis_admin.models import User
from thesis_admin.services.session_service import resolve_user


def session_token(request: Request) -> str | None:
    """Read the session token from a bearer header, falling back to the session cookie."""
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(settings.session_cookie_name)


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    """Resolve the acting user from the session, raising 401 if there is none."""
    user = await resolve_user(db, session_token(request))
    if not user:
        raise HTTPException(401, "Unauthorized")
    return user


def require_permission(permission: str):
    """Build a dependency that lets the request through only if the user's role grants ``permission``."""

    async def check_permission(user: User = Depends(get_current_user)) -> User:
        if not user.has_permission(permission):
            raise HTTPException(403, "Forbidden")
        return user

    return check_permission
