"""`length` command: print the size of the resolved file."""

from tarsym.cli_commands.base import ArchiveCommand
from tarsym.core.extractor import length
from tarsym.core.index import FileEntry


class LengthCommand(ArchiveCommand):
    """Prints the decimal byte size of the file a target resolves to."""

    name = 'length'
    help = 'Print the size in bytes of the resolved file'

    @classmethod
    def run(cls, args, entry: FileEntry) -> None:
        print(length(entry))
