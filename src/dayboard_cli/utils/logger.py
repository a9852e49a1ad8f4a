"""Application logger writing to a rotating file in platformdirs user_log_dir.

The board view owns the terminal, so nothing is logged to stdout/stderr.
Modules ask for a child logger (``get_logger("board")``) which shares the
single file handler attached to the ``dayboard_cli`` logger.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "dayboard_cli"
_LOG_FILE = "dayboard.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _init_logger() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    # Handlers attached by others do not count.
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        return logger

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a named child of it.

    The file handler is created on first call.
    """
    global _logger
    if _logger is None:
        _logger = _init_logger()
    if name:
        return _logger.getChild(name)
    return _logger


def set_level(level: str | int) -> None:
    """Set the application log level (e.g. "DEBUG" or logging.WARNING).

    Unknown level names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    get_logger().setLevel(level)
