from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.repositories.history_repo import HistoryRepository


async def list_history(db: AsyncSession, limit: int):
    return await HistoryRepository(db).list_recent(limit)
