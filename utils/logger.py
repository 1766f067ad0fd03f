"""
utils/logger.py
---------------
Logging for the LightBnB data layer.

Records go to stdout as ``time | level | module | message`` at the level
set by LOG_LEVEL. Repositories log inserts at INFO and failed statements
at ERROR; import `get_logger` rather than calling logging.getLogger directly
so the handler is installed exactly once.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def _configure() -> None:
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    _configure()
    return logging.getLogger(name)
