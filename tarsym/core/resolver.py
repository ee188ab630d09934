"""
Path resolution against an archive index.

Symlinks are followed with physical semantics: once a link expands to a
directory, the rest of the request continues from that directory's own path,
so a later '..' climbs out of the link target rather than back to the
directory that held the link. Relative link targets are resolved against the
directory containing the link, absolute ones against the archive root.

Every expansion counts towards the indirection limit for the whole request.
A link that is reached again while its own target is still being resolved
is reported as a cycle. An empty link target names the directory holding
the link, and a target of "/" names the archive root.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from tarsym.common.config import TarSymSettings, check_max_indirections
from tarsym.common.errors import (
    DepthExceededError,
    NotADirectoryEntryError,
    NotAFileError,
    PathNotFoundError,
    RootEscapeError,
    SymlinkCycleError,
)
from tarsym.core.index import ArchiveIndex, DirectoryEntry, Entry, FileEntry, SymlinkEntry

ROOT = DirectoryEntry("")


@dataclass
class ResolutionContext:
    """State owned by a single top-level resolve call."""

    request: str
    max_indirections: int
    depth: int = 0
    visited: Set[str] = field(default_factory=set)


def normalize_request(path: str) -> str:
    """Strip a trailing '/', a leading './' and a leading '/' from a request."""
    if path.endswith("/"):
        path = path[:-1]
    if path.startswith("./"):
        path = path[2:]
    if path.startswith("/"):
        path = path[1:]
    return path


def _tokenize(path: str) -> List[str]:
    return path.split("/") if path else []


def _directory(parts: List[str]) -> DirectoryEntry:
    return DirectoryEntry("/".join(parts)) if parts else ROOT


class PathResolver:
    """Resolve request paths through the namespace of one archive."""

    def __init__(self, index: ArchiveIndex, max_indirections: Optional[int] = None):
        """
        Args:
            index: The archive index to resolve against
            max_indirections: Symlink expansion limit; read from settings when None

        Raises:
            ConfigError: If the limit is outside 1..MAX_INDIRECTIONS_CAP
        """
        if max_indirections is None:
            max_indirections = TarSymSettings().max_indirections()
        self.index = index
        self.max_indirections = check_max_indirections(max_indirections, "max_indirections")

    def resolve_entry(self, request_path: str) -> Entry:
        """
        Resolve a request to the entry it ultimately names.

        Returns:
            A FileEntry, or a DirectoryEntry (ROOT for the archive root)
        """
        context = ResolutionContext(request_path, self.max_indirections)
        return self._walk(_tokenize(normalize_request(request_path)), [], context)

    def resolve(self, request_path: str) -> FileEntry:
        """
        Resolve a request to a file.

        Raises:
            NotAFileError: If the request ends at a directory
        """
        entry = self.resolve_entry(request_path)
        if not isinstance(entry, FileEntry):
            raise NotAFileError(f"'{request_path}' is a directory, not a file.")
        return entry

    def _walk(self, tokens: List[str], start: List[str], context: ResolutionContext) -> Entry:
        parts = list(start)
        last = len(tokens) - 1

        for position, token in enumerate(tokens):
            if token in ("", "."):
                continue

            if token == "..":
                if not parts:
                    raise RootEscapeError(f"'{context.request}' escapes the archive root.")
                parts.pop()
                continue

            path = "/".join(parts + [token])
            entry = self.index.get(path)
            if entry is None:
                raise PathNotFoundError(f"'{context.request}' not found: no entry '{path}'.")

            if isinstance(entry, SymlinkEntry):
                entry = self._follow(entry, parts, context)

            if isinstance(entry, DirectoryEntry):
                parts = _tokenize(entry.path)
                continue

            if position == last:
                return entry
            raise NotADirectoryEntryError(
                f"'{context.request}': '{entry.path}' is not a directory."
            )

        return _directory(parts)

    def _follow(self, link: SymlinkEntry, parts: List[str], context: ResolutionContext) -> Entry:
        if link.path in context.visited:
            raise SymlinkCycleError(f"'{context.request}': symlink cycle through '{link.path}'.")

        context.depth += 1
        if context.depth >= context.max_indirections:
            raise DepthExceededError(
                f"'{context.request}': too many redirections "
                f"(limit {context.max_indirections}). Giving up."
            )
        start = [] if link.target.startswith("/") else parts
        context.visited.add(link.path)
        try:
            return self._walk(_tokenize(link.target), start, context)
        finally:
            context.visited.discard(link.path)


def resolve(index: ArchiveIndex, request_path: str, max_indirections: Optional[int] = None) -> FileEntry:
    """Resolve `request_path` to a file entry of `index`."""
    return PathResolver(index, max_indirections).resolve(request_path)


def resolve_entry(index: ArchiveIndex, request_path: str, max_indirections: Optional[int] = None) -> Entry:
    """Resolve `request_path` to whatever entry it names, directories included."""
    return PathResolver(index, max_indirections).resolve_entry(request_path)


def canonical_path(index: ArchiveIndex, request_path: str, max_indirections: Optional[int] = None) -> str:
    """Return the path of the file `request_path` ultimately refers to."""
    return resolve(index, request_path, max_indirections).path
