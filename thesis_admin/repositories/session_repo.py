from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.models import UserSession


class SessionRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_active(self, token: str, now: datetime) -> UserSession | None:
        result = await self.db.execute(
            select(UserSession).where(
                UserSession.token == token,
                UserSession.expires_at > now,
            )
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: int, token: str, expires_at: datetime) -> UserSession:
        session = UserSession(user_id=user_id, token=token, expires_at=expires_at)
        self.db.add(session)
        await self.db.commit()
        await self.db.refresh(session)
        return session
