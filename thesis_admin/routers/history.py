from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from thesis_admin.config import settings
from thesis_admin.constants import VIEW_HISTORY
from thesis_admin.database import get_db
from thesis_admin.models import User
from thesis_admin.routers.deps import require_permission
from thesis_admin.schemas.history import HistoryResponse
from thesis_admin.services import history_service

router = APIRouter(prefix="/api/admin/history", tags=["history"])


@router.get("", response_model=list[HistoryResponse], summary="List recent audit log entries")
async def list_history(
    limit: int = Query(default=settings.history_page_size, ge=1, le=500, description="Maximum number of entries"),
    _: User = Depends(require_permission(VIEW_HISTORY)),
    db: AsyncSession = Depends(get_db),
):
    return await history_service.list_history(db, limit)
