import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from thesis_admin.config import settings as app_settings
from thesis_admin.database import engine
from thesis_admin.error_handlers import register_error_handlers
from thesis_admin.routers import history, thesis

logging.basicConfig(
    level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Thesis admin API starting")
    yield
    await engine.dispose()


app = FastAPI(
    title="Thesis Admin API",
    summary="Administrative API for academic thesis records.",
    description=(
        "Administrative endpoints for reviewing and editing thesis submissions.\n\n"
        "- All admin routes require a session token (bearer header or session cookie) "
        "whose user role grants the route's permission.\n"
        "- Thesis updates are merge-patches: only the fields present in the body are changed.\n"
        "- Every successful update is recorded in the history (audit) log.\n"
        "- Thesis IDs are 64-bit integers and are returned as strings.\n"
    ),
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "thesis",
            "description": "Read and update thesis records. Updates require the MODIFY_THESIS permission.",
        },
        {
            "name": "history",
            "description": "Append-only audit log of administrative actions.",
        },
        {
            "name": "system",
            "description": "Health checks and operational endpoints.",
        },
    ],
)

register_error_handlers(app)

app.include_router(thesis.router)
app.include_router(history.router)


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"status\": \"ok\"}` when the service is running."""
    return {"status": "ok"}
