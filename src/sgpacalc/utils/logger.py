"""
Logging setup shared by the state machine and the views.

Every module asks ``get_logger(__name__)`` for its logger; all of them write
through one console handler so output stays consistent.
"""

import logging
import sys

from sgpacalc.config.settings import settings

_FMT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"

_formatter = logging.Formatter(_FMT, datefmt=_DATE_FMT)

_console_handler = logging.StreamHandler(sys.stdout)
_console_handler.setFormatter(_formatter)
_console_handler.setLevel(getattr(logging, settings.log_level, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for *name* with the shared console handler attached.

    Args:
        name: Typically ``__name__`` of the calling module.
    """
    logger = logging.getLogger(name)
    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
