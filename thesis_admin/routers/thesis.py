from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.constants import MAX_BIGINT, MIN_BIGINT, MODIFY_THESIS, VIEW_THESIS
from thesis_admin.database import get_db
from thesis_admin.models import User
from thesis_admin.routers.deps import require_permission
from thesis_admin.schemas.thesis import ThesisDetail, ThesisUpdate, ThesisUpdateResult
from thesis_admin.services import thesis_service

router = APIRouter(prefix="/api/admin/thesis", tags=["thesis"])


@router.get("/{thesis_id}", response_model=ThesisDetail, summary="Get a thesis by ID")
async def get_thesis(
    thesis_id: int = Path(ge=MIN_BIGINT, le=MAX_BIGINT, description="Thesis ID"),
    _: User = Depends(require_permission(VIEW_THESIS)),
    db: AsyncSession = Depends(get_db),
):
    return ThesisDetail(thesis=await thesis_service.get_thesis(db, thesis_id))


@router.put("/{thesis_id}", response_model=ThesisUpdateResult, summary="Update a thesis")
async def update_thesis(
    data: ThesisUpdate,
    thesis_id: int = Path(ge=MIN_BIGINT, le=MAX_BIGINT, description="Thesis ID"),
    actor: User = Depends(require_permission(MODIFY_THESIS)),
    db: AsyncSession = Depends(get_db),
):
    """Apply the fields present in the body to the thesis; omitted fields are left unchanged."""
    thesis = await thesis_service.update_thesis(db, thesis_id, data.model_dump(exclude_unset=True), actor)
    return ThesisUpdateResult(message="Thesis updated successfully", thesis=thesis)
