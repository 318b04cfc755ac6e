"""Global exception handlers that give every error response a JSON ``message``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


def _is_malformed_body(errors: list[dict]) -> bool:
    """True when the body is absent or not parseable JSON, as opposed to schema-invalid."""
    for e in errors:
        loc = tuple(e["loc"])
        if e["type"] == "json_invalid" and loc[:1] == ("body",):
            return True
        if e["type"] == "missing" and loc == ("body",):
            return True
    return False


def _field_name(loc) -> str:
    # Drop the "body"/"path"/"query" prefix FastAPI adds
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


def build_validation_errors(errors) -> list[dict]:
    return [
        {"field": _field_name(e["loc"]), "message": e["msg"], "type": e["type"]}
        for e in errors
    ]


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    if _is_malformed_body(errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Request body is empty or malformed"},
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": build_validation_errors(errors)},
    )


async def generic_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "error": str(exc)},
    )
