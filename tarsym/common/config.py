"""Configuration for tarsym.

Settings are read from the environment:
    - `TARSYM_MAX_INDIRECTIONS` (or the historical `MAX_INDIRECTIONS`)
    - `TARSYM_LOG_LEVEL`, or `DEBUG` for a quick switch to debug output
"""

import os
from typing import Mapping, Optional

from .constants import (
    DEBUG_ENV,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_INDIRECTIONS,
    LEGACY_MAX_INDIRECTIONS_ENV,
    LOG_LEVEL_ENV,
    MAX_INDIRECTIONS_CAP,
    MAX_INDIRECTIONS_ENV,
)
from .errors import ConfigError


def parse_max_indirections(value: str, source: str = MAX_INDIRECTIONS_ENV) -> int:
    """
    Parse an indirection limit.

    Args:
        value: Raw text, e.g. from the environment or the command line
        source: Name used in the error message

    Returns:
        The limit as a positive integer

    Raises:
        ConfigError: If the value is not an integer between 1 and MAX_INDIRECTIONS_CAP
    """
    try:
        limit = int(value.strip())
    except ValueError:
        raise ConfigError(f"{source} must be an integer, got {value!r}") from None
    return check_max_indirections(limit, source)


def check_max_indirections(limit: int, source: str = MAX_INDIRECTIONS_ENV) -> int:
    """Ensure an indirection limit lies between 1 and MAX_INDIRECTIONS_CAP."""
    if not 1 <= limit <= MAX_INDIRECTIONS_CAP:
        raise ConfigError(
            f"{source} must be between 1 and {MAX_INDIRECTIONS_CAP}, got {limit}"
        )
    return limit


class TarSymSettings:
    """Resolve environment-backed configuration for tarsym."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(key, default)

    def max_indirections(self) -> int:
        for key in (MAX_INDIRECTIONS_ENV, LEGACY_MAX_INDIRECTIONS_ENV):
            value = self.get(key)
            if value:
                return parse_max_indirections(value, key)
        return DEFAULT_MAX_INDIRECTIONS

    def log_level(self) -> str:
        level = self.get(LOG_LEVEL_ENV)
        if level:
            return level
        if self.get(DEBUG_ENV):
            return "DEBUG"
        return DEFAULT_LOG_LEVEL
