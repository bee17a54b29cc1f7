"""Entry point for the Movie Service.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the directory holding ``movies.json``
and ``aphorisms.txt``, for example inside a Docker container where
you only specify a single Python file to run.

Configuration is read from environment variables; see
``movie_service_api/app/core/config.py`` for the full list.  The most
common ones are ``PORT``, ``MOVIES_DATA_PATH`` and ``LOG_LEVEL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from movie_service_api.app.core.config import Settings
from movie_service_api.app.main import create_app


async def main() -> None:
    """Start the movie service using Uvicorn.

    Uvicorn handles SIGINT/SIGTERM itself and drains in-flight
    requests before returning.
    """
    settings = Settings()
    app = create_app(settings)
    logging.getLogger(__name__).info("Starting movie service on %s:%s", settings.host, settings.port)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=10,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
