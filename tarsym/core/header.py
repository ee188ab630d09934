"""
ustar header decoding.

Only the fields needed to rebuild the namespace are read: name, size,
typeflag, linkname and the magic. Archives end at the first block whose magic
does not match, which covers the zero blocks that terminate a tar file as well
as a short read at the end of a truncated one.
"""

from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from tarsym.common.constants import (
    BLOCK_SIZE,
    LINKNAME_FIELD,
    MAGIC_FIELD,
    NAME_FIELD,
    SIZE_FIELD,
    TYPEFLAG_FIELD,
    USTAR_MAGIC,
)
from tarsym.common.errors import ArchiveFormatError


@dataclass(frozen=True)
class TarHeader:
    """A decoded header block."""

    offset: int
    name: str
    typeflag: str
    linkname: str
    size: int

    @property
    def data_offset(self) -> int:
        """Position of the entry's content, right after the header block."""
        return self.offset + BLOCK_SIZE

    @property
    def next_offset(self) -> int:
        """Position of the following header."""
        return self.offset + round_up(self.size) + BLOCK_SIZE


def round_up(size: int, block: int = BLOCK_SIZE) -> int:
    """Round `size` up to the next multiple of `block`."""
    return (size + block - 1) // block * block


def _field(block: bytes, field) -> bytes:
    start, length = field
    return block[start:start + length]


def _text(raw: bytes) -> str:
    nul = raw.find(b"\x00")
    if nul != -1:
        raw = raw[:nul]
    return raw.decode("utf-8", "surrogateescape")


def parse_octal(raw: bytes) -> int:
    """
    Parse a NUL/space terminated ASCII octal field.

    An empty field counts as zero.

    Raises:
        ArchiveFormatError: If the field holds anything but octal digits
    """
    text = raw.split(b"\x00", 1)[0].strip(b" ")
    if not text:
        return 0
    if text.strip(b"01234567"):
        raise ArchiveFormatError(f"Malformed octal field {raw!r}")
    try:
        return int(text.decode("ascii"), 8)
    except (UnicodeDecodeError, ValueError):
        raise ArchiveFormatError(f"Malformed octal field {raw!r}") from None


def read_header(fileobj: BinaryIO, offset: int) -> Optional[TarHeader]:
    """
    Read and decode the header block at `offset`.

    Args:
        fileobj: Seekable binary stream holding the archive
        offset: Byte position of the header block

    Returns:
        The decoded header, or None once the archive is finished
    """
    fileobj.seek(offset)
    block = fileobj.read(BLOCK_SIZE)
    if len(block) < BLOCK_SIZE or _field(block, MAGIC_FIELD) != USTAR_MAGIC:
        return None

    return TarHeader(
        offset=offset,
        name=_text(_field(block, NAME_FIELD)),
        typeflag=_text(_field(block, TYPEFLAG_FIELD)),
        linkname=_text(_field(block, LINKNAME_FIELD)),
        size=parse_octal(_field(block, SIZE_FIELD)),
    )


def iter_headers(fileobj: BinaryIO) -> Iterator[TarHeader]:
    """Yield every header from the start of the archive until it is finished."""
    offset = 0
    while True:
        header = read_header(fileobj, offset)
        if header is None:
            return
        yield header
        offset = header.next_offset
