"""Shared test helpers for seeding users, sessions and theses."""

from sqlalchemy import select

from thesis_admin.models import Role, Thesis, ThesisStatus, User
from thesis_admin.repositories.thesis_repo import ThesisRepository
from thesis_admin.repositories.user_repo import UserRepository

# Above 2**53, so it loses precision if serialized as a JSON number
BIG_THESIS_ID = 9_007_199_254_740_993


async def get_role(db, name: str) -> Role:
    result = await db.execute(select(Role).where(Role.name == name))
    return result.scalar_one()


async def seed_user(db, username: str, email: str | None = None, role: str | None = None) -> User:
    return await UserRepository(db).create(
        username=username,
        email=email or f"{username}@example.edu",
        role=await get_role(db, role) if role else None,
    )


async def seed_thesis(db, author: User, thesis_id: int = BIG_THESIS_ID, **kwargs) -> Thesis:
    """Create a thesis with sensible defaults; any column can be overridden via kwargs."""
    defaults = dict(
        title="X",
        category="Systems",
        keywords=["databases", "indexing"],
        abstract="An abstract.",
        status=ThesisStatus.PENDING,
    )
    defaults.update(kwargs)
    return await ThesisRepository(db).create(thesis_id=thesis_id, author_id=author.id, **defaults)
