"""
Namespace index built from the flat header list of a ustar archive.

Handles:
* Classifying entries as files, directories or symlinks
* Path normalization
* Synthesizing the parent directories of explicit directory entries
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, List, Optional, Union

from tarsym.common.constants import TypeFlags
from tarsym.common.errors import ArchiveFormatError
from tarsym.core.header import TarHeader, iter_headers


@dataclass(frozen=True)
class FileEntry:
    """A regular file; `offset` points at its content, not its header."""

    path: str
    offset: int
    size: int


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory, either declared by a header or implied by a deeper one."""

    path: str


@dataclass(frozen=True)
class SymlinkEntry:
    """A symbolic link with its stored target."""

    path: str
    target: str


Entry = Union[FileEntry, DirectoryEntry, SymlinkEntry]


def normalize_path(name: str) -> str:
    """Strip a trailing '/', a single leading '/' and a leading './'."""
    if name.endswith("/"):
        name = name[:-1]
    if name.startswith("/"):
        name = name[1:]
    if name.startswith("./"):
        name = name[2:]
    return name


class ArchiveIndex:
    """Read-only mapping from normalized path to entry."""

    def __init__(self, entries: Dict[str, Entry]):
        self._entries = dict(entries)

    def get(self, path: str) -> Optional[Entry]:
        return self._entries.get(path)

    def __getitem__(self, path: str) -> Entry:
        return self._entries[path]

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def entries(self) -> List[Entry]:
        """All entries in the order they were first indexed."""
        return list(self._entries.values())

    def files(self) -> List[FileEntry]:
        return [entry for entry in self._entries.values() if isinstance(entry, FileEntry)]


class _IndexBuilder:
    def __init__(self) -> None:
        self.entries: Dict[str, Entry] = {}

    def add(self, header: TarHeader) -> None:
        path = normalize_path(header.name)

        if header.typeflag in TypeFlags.REGULAR:
            self.entries[path] = FileEntry(path, header.data_offset, header.size)
        elif header.typeflag == TypeFlags.DIRECTORY:
            self._add_directory(path)
        elif header.typeflag == TypeFlags.SYMLINK:
            target = header.linkname
            # "/" itself stays, it names the archive root.
            if len(target) > 1 and target.endswith("/"):
                target = target[:-1]
            self.entries[path] = SymlinkEntry(path, target)
        else:
            raise ArchiveFormatError(
                f"Found unhandled entry type {header.typeflag!r} for '{header.name}'"
            )

    def _add_directory(self, path: str) -> None:
        prefix = ""
        for component in path.split("/"):
            if not component:
                continue
            prefix = f"{prefix}/{component}" if prefix else component
            # Never replace whatever already lives at this path.
            self.entries.setdefault(prefix, DirectoryEntry(prefix))


def build_index(fileobj: BinaryIO) -> ArchiveIndex:
    """
    Index every entry of a ustar archive.

    Args:
        fileobj: Seekable binary stream positioned anywhere; reading starts at 0

    Returns:
        The archive index

    Raises:
        ArchiveFormatError: If the first header is unreadable or an entry type is unsupported
    """
    builder = _IndexBuilder()
    seen_header = False
    for header in iter_headers(fileobj):
        seen_header = True
        builder.add(header)

    if not seen_header:
        raise ArchiveFormatError("Unable to read anything. Probably not a compatible tar archive.")
    return ArchiveIndex(builder.entries)


def open_index(archive_path: Union[str, Path]) -> ArchiveIndex:
    """Build the index of an archive on disk."""
    with open(archive_path, "rb") as fileobj:
        return build_index(fileobj)
