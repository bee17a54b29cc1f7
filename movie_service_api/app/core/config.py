"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no environment at all, serving ``movies.json``
and ``aphorisms.txt`` from the current working directory.

A ``Settings`` instance is handed to ``create_app`` and kept on
``app.state``; request handlers obtain it through the
``get_app_settings`` dependency rather than importing a module-level
global.
"""

import os
from dataclasses import dataclass
from typing import Optional

from fastapi import Request


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Movie Service")
    api_version: str = os.getenv("APP_VERSION", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  When set, a file handler rotating at midnight
    # is attached next to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4567"))

    # Relative paths are resolved against the working directory of the
    # server process.  Both files are re-read on every request.
    movies_path: str = os.getenv("MOVIES_DATA_PATH", "movies.json")
    aphorisms_path: str = os.getenv("APHORISMS_PATH", "aphorisms.txt")


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings
