"""
Logging setup for the game area.

Every module logs through a child of the package logger ("tictactoe.area", "tictactoe.game", ...).
The hosting application calls setup_logging() once; library code never configures handlers itself.
"""

import logging
import sys
from typing import Optional

from src.core.config import load_settings

LOGGER_NAME = "tictactoe"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """Child logger of the package logger, e.g. get_logger("area") -> 'tictactoe.area'."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: Optional[int | str] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger. Calling it again only changes the level.

    Without an explicit level, TICTACTOE_LOG_LEVEL decides.
    """
    if level is None:
        level = load_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)
    if not any(getattr(handler, "_tictactoe", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tictactoe = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
