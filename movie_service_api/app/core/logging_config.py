"""
Logging for the movie service.

Request handlers and services log through module loggers; this module
only wires the root logger.  Output always goes to the console so
container runtimes pick it up.  Setting ``LOG_FILE`` additionally
writes a log file that is rolled over every midnight, keeping a week
of history, so data-file read failures can be inspected after the
fact.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BACKUP_DAYS = 7


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service's handlers to the root logger.

    Does nothing when the root logger already has handlers, which is
    the case under uvicorn's own log config, under pytest, or when
    ``create_app`` is called more than once in a process.

    Parameters
    ----------
    level : str
        Level name such as ``"debug"`` or ``"WARNING"``.  Names the
        ``logging`` module does not know are treated as ``INFO``.
    logfile : Optional[str]
        Where to write the daily log file.  ``None`` or an empty string
        keeps logging on the console only.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(
            TimedRotatingFileHandler(
                Path(logfile).resolve(), when="midnight", backupCount=BACKUP_DAYS, encoding="utf-8"
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
