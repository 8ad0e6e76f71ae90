"""Application-wide logger writing to platformdirs user_log_dir.

pomobar runs once per second, so the default level is INFO and routine
per-tick messages are logged at DEBUG. Set ``POMOBAR_LOG_LEVEL=DEBUG`` (or
``--log-level``) to trace every tick.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomobar"
_LOG_FILE = "pomobar.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2
DEFAULT_LEVEL = "INFO"

_logger: logging.Logger | None = None


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Stdout belongs to the status bar, so nothing is ever logged there.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(DEFAULT_LEVEL)
    if not _has_file_handler(logger):
        log_dir = Path(user_log_dir(_APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)

        # delay: an idle tick that logs nothing never opens the file
        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
            delay=True,
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger


def set_log_level(level: str) -> None:
    """Change the level of the application logger, e.g. ``"DEBUG"``."""
    get_logger().setLevel(level.upper())
