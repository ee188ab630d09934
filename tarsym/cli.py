"""
Command Line Interface for tarsym.

Usage: tarsym [--max-indirections N] find|extract|length ARCHIVE PATH
"""

import argparse
import sys
from typing import List, Optional

from tarsym.cli_commands import COMMANDS
from tarsym.cli_helpers import exit_with_error
from tarsym.common.config import parse_max_indirections
from tarsym.common.constants import ExitCodes
from tarsym.common.errors import ConfigError
from tarsym.common.logging_config import configure_logging, get_logger


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with the common exit code."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        exit_with_error(message, ExitCodes.FAILURE)


def _max_indirections_arg(value: str) -> int:
    try:
        return parse_max_indirections(value, '--max-indirections')
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = _ArgumentParser(
        prog='tarsym',
        description='Follow symlinks inside a ustar archive'
    )
    parser.add_argument(
        '--max-indirections',
        type=_max_indirections_arg,
        default=None,
        help='Maximum number of symlinks to expand (default: $TARSYM_MAX_INDIRECTIONS or 40)',
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    configure_logging()
    logger = get_logger(__name__)
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    if not args:
        parser.print_help(sys.stderr)
        sys.exit(ExitCodes.FAILURE)

    parsed_args = parser.parse_args(args)
    logger.debug("Running %s with %s", parsed_args.command, vars(parsed_args))

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help(sys.stderr)
        sys.exit(ExitCodes.FAILURE)


if __name__ == '__main__':
    main()
