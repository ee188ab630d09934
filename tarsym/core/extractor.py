"""Content access for resolved file entries."""

import os
from typing import BinaryIO

from tarsym.common.constants import COPY_CHUNK_SIZE
from tarsym.common.errors import TruncatedArchiveError
from tarsym.core.index import FileEntry


def length(entry: FileEntry) -> int:
    """Return the content size of a file entry."""
    return entry.size


def _ensure_available(fileobj: BinaryIO, entry: FileEntry) -> None:
    archive_size = fileobj.seek(0, os.SEEK_END)
    available = max(archive_size - entry.offset, 0)
    if available < entry.size:
        raise TruncatedArchiveError(
            f"'{entry.path}' declares {entry.size} bytes but only {available} remain in the archive."
        )


def read_bytes(fileobj: BinaryIO, entry: FileEntry) -> bytes:
    """
    Read the full content of a file entry.

    Raises:
        TruncatedArchiveError: If the archive ends before the content does
    """
    _ensure_available(fileobj, entry)
    fileobj.seek(entry.offset)
    data = fileobj.read(entry.size)
    if len(data) != entry.size:
        raise TruncatedArchiveError(
            f"'{entry.path}' declares {entry.size} bytes but only {len(data)} could be read."
        )
    return data


def copy_to(fileobj: BinaryIO, entry: FileEntry, out: BinaryIO, chunk_size: int = COPY_CHUNK_SIZE) -> int:
    """
    Stream the content of a file entry to `out`.

    The archive length is checked before anything is written.

    Returns:
        Number of bytes written
    """
    _ensure_available(fileobj, entry)
    fileobj.seek(entry.offset)
    remaining = entry.size
    while remaining:
        chunk = fileobj.read(min(chunk_size, remaining))
        if not chunk:
            raise TruncatedArchiveError(
                f"'{entry.path}' ended {remaining} bytes early while copying."
            )
        out.write(chunk)
        remaining -= len(chunk)
    return entry.size
