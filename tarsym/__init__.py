"""tarsym - follow symlinks inside ustar archives.

Provides:
* ustar header decoding and namespace indexing
* Symlink-aware path resolution with a bounded indirection depth
* Content extraction for resolved files
* Thin CLI wrapper (`tarsym find|extract|length`)
"""

from ._version import __version__
from .common.logging_config import configure_logging  # noqa: F401
from .common.config import TarSymSettings  # noqa: F401
from .core import (  # noqa: F401
    ArchiveIndex,
    PathResolver,
    build_index,
    canonical_path,
    open_index,
    read_bytes,
    resolve,
)

__all__ = [
    "__version__",
    "configure_logging",
    "TarSymSettings",
    "ArchiveIndex",
    "PathResolver",
    "build_index",
    "canonical_path",
    "open_index",
    "read_bytes",
    "resolve",
]
