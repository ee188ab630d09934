"""Archive indexing, path resolution and content extraction."""

from .extractor import copy_to, length, read_bytes
from .header import TarHeader, iter_headers, read_header
from .index import (
    ArchiveIndex,
    DirectoryEntry,
    Entry,
    FileEntry,
    SymlinkEntry,
    build_index,
    normalize_path,
    open_index,
)
from .resolver import PathResolver, canonical_path, resolve, resolve_entry

__all__ = [
    "ArchiveIndex",
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "PathResolver",
    "SymlinkEntry",
    "TarHeader",
    "build_index",
    "canonical_path",
    "copy_to",
    "iter_headers",
    "length",
    "normalize_path",
    "open_index",
    "read_bytes",
    "read_header",
    "resolve",
    "resolve_entry",
]
