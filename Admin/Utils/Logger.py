"""
Logging setup for the admin backend.

create_app() calls configure_logging() with Config.LOG_LEVEL; modules obtain
their logger with get_logger(__name__).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler = None


def configure_logging(level: str = "INFO") -> None:
    """Attach the stdout handler to the root logger and set its level.

    Calling it again (one call per app instance) only updates the level.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(_handler)
    root.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
