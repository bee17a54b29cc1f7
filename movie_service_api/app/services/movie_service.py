"""
Service layer for movie records.

Movies live in a single JSON file holding an array of objects.  The
file is treated as read-only and is re-read on every call to
``load_movies``; there is no in-process cache.  Records are passed
through untouched: the only field the service looks at is ``imdbID``.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

MovieRecord = Dict[str, Any]

ID_FIELD = "imdbID"


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_finite_float(text: str) -> float:
    # Values such as 1e400 overflow to inf and could not be sent back.
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


class MovieService:
    """Read-only access to the movie collection."""

    @classmethod
    def load_movies(cls, path: str) -> List[Any]:
        """Read and parse the movie file at ``path``.

        Any failure (missing or unreadable file, malformed or too deeply
        nested JSON, ``NaN``/``Infinity`` or out-of-range numbers, or a
        document that is not an array) is logged and an empty list is
        returned instead, so callers always receive a list that can be
        rendered back as standard JSON.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                movies = json.load(f, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        except (OSError, ValueError, RecursionError) as exc:
            logger.error("Failed to read %s: %s", path, exc)
            return []
        if not isinstance(movies, list):
            logger.error("Failed to read %s: expected a JSON array, got %s", path, type(movies).__name__)
            return []
        return movies

    @staticmethod
    def find_by_id(movies: List[Any], movie_id: Optional[str]) -> Optional[MovieRecord]:
        """Return the first record whose ``imdbID`` equals ``movie_id``.

        A missing id is compared as the empty string.  Entries that are
        not JSON objects never match.
        """
        wanted = movie_id if movie_id is not None else ""
        for movie in movies:
            if isinstance(movie, dict) and movie.get(ID_FIELD) == wanted:
                return movie
        return None
