"""Shared CLI helpers for tarsym commands."""

import logging
import sys
from typing import Optional

from tarsym.common.constants import ExitCodes
from tarsym.common.errors import TarSymError
from tarsym.core.index import ArchiveIndex, FileEntry, SymlinkEntry


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to tarsym exit codes."""
    if isinstance(exc, (TarSymError, OSError)):
        return ExitCodes.FAILURE
    return None


def describe_exception(exc: Exception, archive_path: str) -> str:
    """Build the user-facing message for a failed command."""
    if isinstance(exc, OSError) and getattr(exc, "filename", None) == archive_path:
        return f"file: {archive_path} not accessible"
    return str(exc)


def dump_index(index: ArchiveIndex, logger: logging.Logger) -> None:
    """Log every indexed entry at debug level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug("Indexed %d entries", len(index))
    for entry in index.entries():
        if isinstance(entry, FileEntry):
            logger.debug("  FILE: %s offset=%d size=%d", entry.path, entry.offset, entry.size)
        elif isinstance(entry, SymlinkEntry):
            logger.debug("  LINK: %s -> %s", entry.path, entry.target)
        else:
            logger.debug("   DIR: %s", entry.path)
