"""Centralized logging.

Every module asks for its logger through ``get_logger(__name__)`` so output
shares one format and one stdout handler.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def get_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """Return a logger with the dashboard's standard formatting.

    Args:
        name: Name of the calling module (usually ``__name__``).
        level: Level applied the first time the logger is configured.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def set_level(level: int | str) -> None:
    """Apply ``level`` to every logger already created under the package."""
    root = logging.getLogger("school_dashboard")
    root.setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("school_dashboard") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
