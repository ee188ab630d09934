"""Central logging configuration utilities for tarsym.

Logs go to stderr; stdout is reserved for command output, which may be raw
archive content.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import TarSymSettings

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `TARSYM_LOG_LEVEL`
    3. `DEBUG` if the `DEBUG` environment variable is non-empty
    4. Fallback to `WARNING`
    """
    if level is None:
        level = TarSymSettings().log_level()

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger, configuring logging lazily on first access."""
    logger = logging.getLogger(name or "tarsym")
    if not logging.getLogger().handlers:  # pragma: no cover - defensive
        configure_logging()
    return logger


__all__ = ["configure_logging", "get_logger"]
