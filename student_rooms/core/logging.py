# student_rooms/core/logging.py

import logging
import sys

from student_rooms.core.config import settings


DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers pinned to a fixed level regardless of LOG_LEVEL
PINNED_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.INFO,
    # python-multipart logs every parsed part of an upload at DEBUG
    "multipart": logging.WARNING,
    "python_multipart": logging.WARNING,
}


def setup_logging(level_name: str | None = None) -> None:
    """
    Configure logging for the rooms service.

    The root level comes from ``level_name`` or LOG_LEVEL (INFO when the
    name is unknown). Records go to stdout in one pipe-separated line. When
    uvicorn has already installed handlers only the level is changed, so
    running under ``uvicorn student_rooms.main:app`` does not double every
    line.
    """
    level = getattr(logging, (level_name or settings.LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(handler)

    for name, pinned in PINNED_LEVELS.items():
        logging.getLogger(name).setLevel(pinned)


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger for a rooms-service module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
