"""
Main entrypoint for the Landing Page API.

This module assembles the FastAPI application, sets up logging,
creates and seeds the in‑memory store and includes the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn or another ASGI server, e.g.::

    uvicorn landing_api.app.main:app --reload

Tests call ``create_app`` directly to get an app with a fresh store.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import InMemoryStore, init_store
from .services.content_service import ContentValidationError, simplify_errors

logger = logging.getLogger(__name__)

INVALID_EMAIL_DETAIL = "Invalid email format"
INVALID_CONTENT_DETAIL = "Invalid content format"
INTERNAL_ERROR_DETAIL = "Internal server error"


def _validation_detail(path: str) -> str:
    if path.startswith("/api/whitelist"):
        return INVALID_EMAIL_DETAIL
    if path.startswith("/api/content"):
        return INVALID_CONTENT_DETAIL
    return "Invalid request"


def create_app(store: Optional[InMemoryStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[InMemoryStore]
        Store to serve from.  When omitted a new store is created and,
        if ``seed_default_content`` is enabled, seeded with the default
        sections.  A store passed in is used as is.
    app_settings : Optional[Settings]
        Settings override; defaults to the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    if store is None:
        store = InMemoryStore()
        if app_settings.seed_default_content:
            # Seeding is synchronous and finishes before the app object
            # is returned, so no request can observe a missing section.
            init_store(store)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, debug=app_settings.debug)
    app.state.store = store
    app.state.settings = app_settings

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _validation_detail(request.url.path), "errors": simplify_errors(exc.errors())},
        )

    @app.exception_handler(ContentValidationError)
    async def content_validation_handler(request: Request, exc: ContentValidationError) -> JSONResponse:
        logger.info("Rejected content for section %s", exc.section)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": INVALID_CONTENT_DETAIL, "errors": exc.errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": INTERNAL_ERROR_DETAIL},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
