"""Registry for CLI subcommands."""

from .extract_command import ExtractCommand
from .find_command import FindCommand
from .length_command import LengthCommand

COMMANDS = (
    FindCommand,
    ExtractCommand,
    LengthCommand,
)

__all__ = ["COMMANDS", "FindCommand", "ExtractCommand", "LengthCommand"]
