"""`find` command: print the canonical path behind a possibly symlinked path."""

from tarsym.cli_commands.base import ArchiveCommand
from tarsym.core.index import FileEntry


class FindCommand(ArchiveCommand):
    """Prints the path of the file a target resolves to."""

    name = 'find'
    help = 'Print the real file behind a possibly symlinked path'

    @classmethod
    def run(cls, args, entry: FileEntry) -> None:
        print(entry.path)
