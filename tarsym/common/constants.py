"""
Constants and exit codes for tarsym.
"""


class ExitCodes:
    """Exit codes for the command line tool."""
    OK = 0
    FAILURE = 1


class TypeFlags:
    """ustar typeflag values understood by the indexer."""
    REGULAR = ("", "0")
    SYMLINK = "2"
    DIRECTORY = "5"


# ustar layout
BLOCK_SIZE = 512
USTAR_MAGIC = b"ustar  "

NAME_FIELD = (0, 100)
SIZE_FIELD = (124, 12)
TYPEFLAG_FIELD = (156, 1)
LINKNAME_FIELD = (157, 100)
MAGIC_FIELD = (257, 7)

# Linux MAXSYMLINKS. The POSIX minimum (_POSIX_SYMLOOP_MAX) is 8.
DEFAULT_MAX_INDIRECTIONS = 40
# Link following recurses; keep the limit well inside the interpreter stack.
MAX_INDIRECTIONS_CAP = 256
MAX_INDIRECTIONS_ENV = "TARSYM_MAX_INDIRECTIONS"
LEGACY_MAX_INDIRECTIONS_ENV = "MAX_INDIRECTIONS"

LOG_LEVEL_ENV = "TARSYM_LOG_LEVEL"
DEBUG_ENV = "DEBUG"
DEFAULT_LOG_LEVEL = "WARNING"

COPY_CHUNK_SIZE = 64 * 1024
