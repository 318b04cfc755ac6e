from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.models import History


class HistoryRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_recent(self, limit: int) -> list[History]:
        result = await self.db.execute(
            select(History).order_by(History.created_at.desc(), History.id.desc()).limit(limit)
        )
        return list(result.scalars().all())

    async def add(self, user_id: int, action: str, description: str) -> History:
        """Stage a history row in the current transaction."""
        entry = History(user_id=user_id, action=action, description=description)
        self.db.add(entry)
        await self.db.flush()
        return entry
