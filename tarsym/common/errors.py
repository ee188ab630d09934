"""
Custom exception classes for tarsym.
"""


class TarSymError(Exception):
    """Base exception class for tarsym errors."""
    pass


class ConfigError(TarSymError):
    """Raised when a configuration value cannot be used."""
    pass


class ArchiveFormatError(TarSymError):
    """Raised when the archive is not a compatible ustar archive or holds an unsupported entry."""
    pass


class TruncatedArchiveError(TarSymError):
    """Raised when fewer bytes remain than an entry declares."""
    pass


class PathNotFoundError(TarSymError):
    """Raised when a path component does not exist in the archive."""
    pass


class NotADirectoryEntryError(TarSymError):
    """Raised when traversal tries to descend through a non-directory entry."""
    pass


class NotAFileError(TarSymError):
    """Raised when a request resolves to a directory instead of a file."""
    pass


class SymlinkCycleError(TarSymError):
    """Raised when the same symlink is expanded twice within one chain."""
    pass


class DepthExceededError(TarSymError):
    """Raised when resolution expands too many symlinks."""
    pass


class RootEscapeError(TarSymError):
    """Raised when a '..' component is applied at the archive root."""
    pass
