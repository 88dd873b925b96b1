"""Package logger for setkit.

The library only emits records; handlers and levels belong to the host
application. A NullHandler keeps the package silent when nothing is configured.
"""

import logging
import sys
from typing import Final

__all__ = ["DEFAULT_LOGGER_NAME", "get_logger", "logger", "setup_logger"]

DEFAULT_LOGGER_NAME: Final[str] = "setkit"
DEFAULT_LEVEL: Final[int] = logging.INFO


def _resolve_level(level: str | int | None) -> int:
    """Numeric log level; unknown names fall back to DEFAULT_LEVEL."""
    if level is None:
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def setup_logger(level: str | int | None = None) -> logging.Logger:
    """
    Opt-in stdout handler for the package logger (scripts, debugging).

    Args:
        level: Log level name or number. Unknown values fall back to INFO.

    Returns:
        The package logger
    """
    if not any(getattr(h, "_setkit_stream", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handler._setkit_stream = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Child logger of the package logger for a module (`__name__`)."""
    return logger.getChild(module_name.removeprefix(f"{DEFAULT_LOGGER_NAME}."))


logger = logging.getLogger(DEFAULT_LOGGER_NAME)
logger.addHandler(logging.NullHandler())
