import logging

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.constants import ACTION_UPDATED_THESIS
from thesis_admin.models import Thesis, User
from thesis_admin.repositories.history_repo import HistoryRepository
from thesis_admin.repositories.thesis_repo import ThesisRepository
from thesis_admin.repositories.user_repo import UserRepository
from thesis_admin.schemas.thesis import ThesisResponse

logger = logging.getLogger(__name__)

UPDATABLE_THESIS_FIELDS = ("title", "category", "keywords", "abstract", "status")


def to_thesis_response(thesis: Thesis, author_name: str) -> ThesisResponse:
    return ThesisResponse(
        thesis_id=str(thesis.thesis_id),
        title=thesis.title,
        author_name=author_name,
        category=thesis.category,
        keywords=list(thesis.keywords or []),
        abstract=thesis.abstract,
        status=thesis.status,
        created_at=thesis.created_at,
        updated_at=thesis.updated_at,
    )


async def _get_thesis_or_404(repo: ThesisRepository, thesis_id: int) -> Thesis:
    thesis = await repo.get_by_id(thesis_id)
    if not thesis:
        raise HTTPException(404, "Thesis not found")
    return thesis


async def get_thesis(db: AsyncSession, thesis_id: int) -> ThesisResponse:
    thesis = await _get_thesis_or_404(ThesisRepository(db), thesis_id)
    return to_thesis_response(thesis, thesis.author.username)


async def update_thesis(db: AsyncSession, thesis_id: int, data: dict, actor: User) -> ThesisResponse:
    """Merge-patch a thesis and record the change in the history log.

    ``data`` should come from ``ThesisUpdate.model_dump(exclude_unset=True)``
    so that omitted fields keep their stored values. Both lookups happen
    before anything is written; the thesis update and the history row are
    committed together.
    """
    repo = ThesisRepository(db)
    thesis = await _get_thesis_or_404(repo, thesis_id)
    prior_author_name = thesis.author.username

    author = None
    if "author_name" in data:
        author = await UserRepository(db).get_by_username(data["author_name"])
        if not author:
            raise HTTPException(404, "Author not found")

    changes = {field: data[field] for field in UPDATABLE_THESIS_FIELDS if field in data}
    if author is not None:
        changes["author_id"] = author.id
    await repo.apply_changes(thesis, changes)

    await HistoryRepository(db).add(
        user_id=actor.id,
        action=ACTION_UPDATED_THESIS,
        description=f'Thesis titled "{thesis.title}" updated by {actor.email}',
    )
    await db.commit()
    await db.refresh(thesis)

    logger.info(f"Thesis {thesis_id} updated by {actor.username} (fields: {sorted(changes)})")
    return to_thesis_response(thesis, author.username if author else prior_author_name)
