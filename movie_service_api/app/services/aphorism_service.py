"""
Service layer for aphorisms shown on the landing page.

Aphorisms are kept in a plain text file, one entry per block, with
blocks separated by a ``%`` character (the classic ``fortune`` file
layout).  Each entry ends with `` - Author``.  When the file cannot be
read a small built-in list is used so the landing page always has
something to show.
"""

from __future__ import annotations

import logging
import random
from typing import List, Tuple

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "%"
AUTHOR_SEPARATOR = " - "
EMPTY_MESSAGE = "No aphorisms available"
UNKNOWN_AUTHOR = "Unknown"

DEFAULT_APHORISMS = [
    "If I stop to kick every barking dog I am not going to get where I'm going. - Jackie Joyner-Kersee",
    "Optimism is the faith that leads to achievement. - Helen Keller",
]


class AphorismService:
    """Load, pick and split aphorisms."""

    @classmethod
    def read_aphorisms(cls, path: str) -> List[str]:
        """Return the non-empty entries of the aphorism file at ``path``.

        Falls back to ``DEFAULT_APHORISMS`` if the file cannot be read
        or decoded.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read aphorisms from %s: %s", path, exc)
            return list(DEFAULT_APHORISMS)
        return [entry.strip() for entry in content.split(ENTRY_SEPARATOR) if entry.strip()]

    @staticmethod
    def random_aphorism(aphorisms: List[str]) -> str:
        if not aphorisms:
            return EMPTY_MESSAGE
        return random.choice(aphorisms)

    @staticmethod
    def format_aphorism(aphorism: str) -> Tuple[str, str]:
        """Split an aphorism into ``(statement, author)``.

        The split happens on the last `` - `` so hyphenated text in the
        statement itself is left alone.  Entries without an author are
        attributed to ``"Unknown"``.
        """
        statement, sep, author = aphorism.rpartition(AUTHOR_SEPARATOR)
        if not sep or not statement.strip() or not author.strip():
            return aphorism.strip(), UNKNOWN_AUTHOR
        return statement.strip(), author.strip()

    @classmethod
    def random_quote(cls, path: str) -> Tuple[str, str]:
        """Pick a random aphorism from ``path`` and split it."""
        return cls.format_aphorism(cls.random_aphorism(cls.read_aphorisms(path)))
