"""`extract` command: dump the resolved file's content to stdout."""

import sys

from tarsym.cli_commands.base import ArchiveCommand
from tarsym.core.extractor import copy_to
from tarsym.core.index import FileEntry


class ExtractCommand(ArchiveCommand):
    """Writes the raw content of the file a target resolves to."""

    name = 'extract'
    help = "Write the resolved file's content to stdout"

    @classmethod
    def run(cls, args, entry: FileEntry) -> None:
        out = getattr(sys.stdout, "buffer", sys.stdout)
        with open(args.archive, "rb") as archive:
            copy_to(archive, entry, out)
        out.flush()
