# === FILE: site_harvest/logger.py ===
"""Logging setup for **SiteHarvest**.

Every module logs through a child of the ``SiteHarvest`` logger, named after
its component::

    from site_harvest.logger import get_logger
    logger = get_logger("crawler")     # -> "SiteHarvest.crawler"

Handlers live on the parent only. :func:`init_logging` (called once by the CLI)
installs them: stdout always, plus a rotating file when ``--log-file`` is given.
Until then the children fall through to Python's last-resort handler, which
prints warnings and errors to stderr.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteHarvest"

LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """The project logger, or its ``SiteHarvest.<component>`` child."""
    if not component:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def _with_format(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    return handler


def init_logging(
    level: _LevelT = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)install the handlers of the project logger.

    Handlers from an earlier call are closed and dropped, so calling this twice
    never duplicates output. Raises ``ValueError`` when *log_format* holds no
    ``%(...)s`` field.
    """
    # built first so a bad format leaves the current handlers untouched
    formatter = logging.Formatter(log_format)

    root = get_logger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.addHandler(_with_format(logging.StreamHandler(sys.stdout), formatter))
    if log_file is not None:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        root.addHandler(_with_format(file_handler, formatter))

    # children propagate up to here and stop
    root.propagate = False
    return root


__all__ = ["get_logger", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
