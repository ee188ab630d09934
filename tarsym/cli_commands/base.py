"""Common plumbing for commands that resolve a path inside an archive."""

from tarsym.cli_helpers import describe_exception, dump_index, exit_with_error, map_exception_to_exit_code
from tarsym.common.config import TarSymSettings
from tarsym.common.constants import ExitCodes
from tarsym.common.errors import TarSymError
from tarsym.common.logging_config import get_logger
from tarsym.core.index import FileEntry, open_index
from tarsym.core.resolver import PathResolver


class ArchiveCommand:
    """Base class for `<command> <archive> <target>` subcommands."""

    name = ""
    help = ""

    @classmethod
    def add_parser(cls, subparsers) -> None:
        """Add the command parser to subparsers."""
        parser = subparsers.add_parser(cls.name, help=cls.help)
        parser.add_argument('archive', help='Path to the ustar archive')
        parser.add_argument('target', help='Path inside the archive, possibly through symlinks')
        parser.set_defaults(func=cls.execute)

    @classmethod
    def execute(cls, args) -> None:
        """Resolve the target and run the command, exiting with 1 on any failure."""
        try:
            entry = cls.resolve_target(args)
            cls.run(args, entry)
        except (TarSymError, OSError) as exc:
            exit_code = map_exception_to_exit_code(exc) or ExitCodes.FAILURE
            exit_with_error(describe_exception(exc, args.archive), exit_code)

    @staticmethod
    def resolve_target(args) -> FileEntry:
        logger = get_logger(__name__)
        index = open_index(args.archive)
        dump_index(index, logger)

        max_indirections = getattr(args, "max_indirections", None)
        if max_indirections is None:
            settings = getattr(args, "settings", None)
            if not isinstance(settings, TarSymSettings):
                settings = TarSymSettings()
            max_indirections = settings.max_indirections()

        entry = PathResolver(index, max_indirections).resolve(args.target)
        logger.info("Resolved '%s' to '%s'", args.target, entry.path)
        return entry

    @classmethod
    def run(cls, args, entry: FileEntry) -> None:
        raise NotImplementedError
