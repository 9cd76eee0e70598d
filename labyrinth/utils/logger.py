"""Logging setup for the ``labyrinth`` package.

Only the package logger is configured; a host application keeps control of
the root logger and of any handlers it installs there.
"""

from __future__ import annotations

import logging
from typing import Optional


PACKAGE_LOGGER = "labyrinth"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


class _MazeHandler(logging.StreamHandler):
    """Marker type so reconfiguration only replaces handlers added here."""


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the ``labyrinth`` logger and set its level.

    Calling it again (the CLI does so after parsing ``--log-level``) swaps the
    previous handler instead of stacking a second one.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, _MazeHandler)]:
        logger.removeHandler(handler)

    handler = _MazeHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under ``labyrinth``, configuring defaults on first use."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
