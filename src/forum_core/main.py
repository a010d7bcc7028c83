# src/forum_core/main.py
"""Main entry point for the forum core HTTP service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from forum_core.api.v1 import (
    comments_router,
    moderation_router,
    sections_router,
    topics_router,
    users_router,
)
from forum_core.core.settings import settings
from forum_core.errors import (
    AlreadyAdmittedError,
    ConstraintViolationError,
    ForumError,
    InputValidationError,
    NotFoundError,
    TransientStoreError,
)
from forum_core.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Discussion forum sections, topics, comments and moderation",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(sections_router, prefix="/api/v1")
app.include_router(topics_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(moderation_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")

_ERROR_STATUS: dict[type[ForumError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyAdmittedError: status.HTTP_409_CONFLICT,
    InputValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ConstraintViolationError: status.HTTP_409_CONFLICT,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: ForumError) -> int:
    """Return the HTTP status code for a forum error."""
    for error_type, code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(ForumError)
async def forum_error_handler(_request: Request, exc: ForumError) -> JSONResponse:
    code = status_for(exc)
    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unhandled forum error: %s", exc)
    headers = {"Retry-After": "1"} if isinstance(exc, TransientStoreError) else None
    return JSONResponse(
        status_code=code,
        content=ErrorResponse(detail=str(exc), error=type(exc).__name__).model_dump(),
        headers=headers,
    )


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("forum_core.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
