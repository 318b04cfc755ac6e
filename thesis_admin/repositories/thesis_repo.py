from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.models import Thesis


class ThesisRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, thesis_id: int) -> Thesis | None:
        result = await self.db.execute(
            select(Thesis).where(Thesis.thesis_id == thesis_id)
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs) -> Thesis:
        thesis = Thesis(**kwargs)
        self.db.add(thesis)
        await self.db.commit()
        await self.db.refresh(thesis)
        return thesis

    async def apply_changes(self, thesis: Thesis, changes: dict) -> Thesis:
        """Set the given column values, touch updated_at and flush without committing."""
        for field, value in changes.items():
            setattr(thesis, field, value)
        # An empty patch still counts as a modification
        thesis.updated_at = func.now()
        await self.db.flush()
        return thesis
