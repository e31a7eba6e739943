"""Timestamped diagnostic lines on stderr.

Every module logs through a ``primecheck.*`` logger; nothing here touches
stdout, so swapping the handler for ``logging.NullHandler`` changes nothing
the user sees on the primary stream.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "primecheck"
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def configure_diagnostics(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler; errors are shown even when not verbose."""
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG if verbose else logging.ERROR)
    # Keep diagnostics off whatever the root logger writes to.
    _logger.propagate = False
    return _logger


def log(level: int, message: str, *args) -> None:
    _logger.log(level, message, *args)


__all__ = ["configure_diagnostics", "log", "LOGGER_NAME"]
