"""
Main entrypoint for the Movie Service.

This module assembles the FastAPI application, sets up logging,
registers the global error handlers and includes the versioned
router.  The ``create_app`` function builds and configures the app
from an explicit ``Settings`` object; an instance built from the
environment is created at module import time as ``app`` so it can be
served directly, e.g.::

    uvicorn movie_service_api.app.main:app --port 4567

Every error leaves the service as a JSON object with a single
``error`` key.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "There is nothing to do here! 404!"
SERVER_ERROR = "Something went wrong!"

# Status codes the router itself raises when no route matches the
# path, or the path matches but the method does not.
_ROUTING_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


def _is_routing_miss(exc: StarletteHTTPException) -> bool:
    # The router raises without a detail, leaving the default reason
    # phrase; endpoints always supply their own message.
    return exc.status_code in _ROUTING_STATUSES and exc.detail in ("Not Found", "Method Not Allowed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": ...}``.

    Unmatched routes, including a known path requested with an
    unsupported method, all answer with the same 404 body.
    """
    if _is_routing_miss(exc):
        logger.warning("Route not found: %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": ROUTE_NOT_FOUND})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Hide unexpected failures behind a generic 500 response."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": SERVER_ERROR})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this application instance.  Defaults to
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings()

    # Initialise logging before anything else so that the first
    # requests are already logged with the configured format.
    setup_logging(settings.log_level, settings.log_file)

    # Trailing-slash variants are unknown paths, not redirects.
    app = FastAPI(title=settings.project_name, version=settings.api_version, redirect_slashes=False)
    app.state.settings = settings

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(v1_router)

    logger.info(
        "Movie service configured (movies=%s aphorisms=%s)",
        settings.movies_path, settings.aphorisms_path,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
