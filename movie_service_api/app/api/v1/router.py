"""
Top-level router for version 1 of the API.

This router aggregates the endpoint routers.  The routes are served
at the root of the application rather than under a version prefix so
existing clients calling ``/movies`` keep working.
"""

from fastapi import APIRouter

from .endpoints import health, landing, movies

# Prefix used when the service sits behind a gateway that routes on
# the first path segment.
GATEWAY_PREFIX = "/movie-service"

router = APIRouter()

router.include_router(landing.router, tags=["landing"])
router.include_router(movies.router, tags=["movies"])
router.include_router(health.router, tags=["health"])
# The movie and health routes are included a second time under the
# gateway prefix.  Both paths expose identical endpoints, e.g.
# ``GET /movies`` and ``GET /movie-service/movies``.
router.include_router(movies.router, prefix=GATEWAY_PREFIX, tags=["movies"])
router.include_router(health.router, prefix=GATEWAY_PREFIX, tags=["health"])
