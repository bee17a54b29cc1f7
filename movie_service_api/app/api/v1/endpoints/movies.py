"""
Movie endpoints for API v1.

These routes expose the read-only movie collection.  The backing file
is re-read on every request, so edits to it show up without a restart.
Records are returned exactly as stored; the schemas referenced here
only document the shape.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from movie_service_api.app.core.config import Settings, get_app_settings
from movie_service_api.app.schemas.common import ErrorResponse
from movie_service_api.app.schemas.movie import Movie
from movie_service_api.app.services.movie_service import MovieService

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND = "Movie with requested ID not found"

router = APIRouter()


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "-"


@router.get("/movies", responses={200: {"model": List[Movie]}})
def list_movies(request: Request, settings: Settings = Depends(get_app_settings)) -> JSONResponse:
    """Return every movie in the data file.

    An unreadable or malformed file yields an empty list, never an
    error.
    """
    logger.info(
        "Received request for all movies (client=%s method=%s path=%s)",
        _client_host(request), request.method, request.url.path,
    )
    movies = MovieService.load_movies(settings.movies_path)
    return JSONResponse(content=movies)


@router.get(
    "/movies/{movie_id}",
    responses={200: {"model": Movie}, 404: {"model": ErrorResponse}},
)
def get_movie(movie_id: str, request: Request, settings: Settings = Depends(get_app_settings)) -> JSONResponse:
    """Retrieve a single movie by its IMDb id.

    Returns HTTP 404 if no record carries the requested ``imdbID``.
    When several records share an id, the first one in the file wins.
    """
    logger.info(
        "Received request for movie %s (client=%s method=%s path=%s)",
        movie_id, _client_host(request), request.method, request.url.path,
    )
    movies = MovieService.load_movies(settings.movies_path)
    movie = MovieService.find_by_id(movies, movie_id)
    if movie is None:
        logger.warning("Movie %s not found", movie_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return JSONResponse(content=movie)
