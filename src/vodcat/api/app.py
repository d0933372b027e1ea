"""FastAPI application factory.

Every error response has the body {"error": <status>}, whether it comes
from a route, an unknown path, request validation or an unhandled
exception.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vodcat import __version__
from vodcat.config import Settings
from vodcat.models.types import ErrorStatus

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


def get_catalog_root(request: Request) -> Path:
    """Dependency returning the catalog root directory."""
    return request.app.state.settings.data_dir


def _error_response(status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorStatus(error=status_code).model_dump(),
        headers=headers,
    )


def create_app(data_dir: Path | None = None, settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        data_dir: Optional catalog root, overriding settings.data_dir.
        settings: Optional settings; read from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()
    if data_dir is not None:
        settings = replace(settings, data_dir=Path(data_dir))

    app = FastAPI(
        title="vodcat API",
        description="Read-only catalog of vods, highlights, clips and replays",
        version=__version__,
    )
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(422)

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500)

    # Include routes
    from vodcat.api.routes import collections

    app.include_router(collections.router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance (uvicorn vodcat.api.app:app)
app = create_app()
