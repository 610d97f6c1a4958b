# === FILE: appcast_scout/logger.py ===
"""Logging setup for **AppcastScout**.

All modules log through the ``AppcastScout`` logger (or its children, e.g.
``AppcastScout.collector``). Records go to *stderr*, leaving stdout to the
URL listings of the CLI, and optionally to a rotating log file::

    from appcast_scout.logger import logger
    logger.info("Scanning %s", path)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "AppcastScout"

# rotation of the optional log file
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _build_handlers(formatter: logging.Formatter, log_file: str | Path | None) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_MAX_LOG_BYTES,
                backupCount=_LOG_BACKUPS,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set up the project logger and return it.

    *level* is a number or a name such as ``"DEBUG"``. Without *log_file*
    only the stderr handler is attached. With *replace_handlers* the
    previous handlers are detached and closed first.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for old in list(lg.handlers):
            lg.removeHandler(old)
            old.close()

    for handler in _build_handlers(logging.Formatter(log_format), log_file):
        lg.addHandler(handler)

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Used by the CLI: replace all handlers and apply *level*."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


# quiet until the CLI (or a caller) asks for more
logger: logging.Logger = init_logging(level="WARNING")

__all__ = ["logger", "configure", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
