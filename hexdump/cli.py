"""
Command-line interface for the hex dump utility.
"""

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from . import __version__
from .dumper import dump
from .errors import ArgumentError
from .models import DEFAULT_BYTES_PER_LINE, DEFAULT_OFFSET, DumpConfig, byte_limit

VERSION = __version__

DESCRIPTION = 'Print a hex dump of a file or of standard input.'

HELP_FLAGS = ('-h', '--help')
VERSION_FLAG = '--version'


@dataclass(frozen=True)
class ExitRequest:
    """Parsing finished the job itself (help or version was printed)."""
    code: int = 0


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports errors instead of exiting."""

    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog='hexdump', description=DESCRIPTION, add_help=False)
    parser.add_argument('file', nargs='?', default=None,
                        help='file to dump (default: stdin)')
    parser.add_argument('-l', dest='bytes_per_line', type=int, metavar='<int>',
                        default=DEFAULT_BYTES_PER_LINE,
                        help=f'bytes per line in output (default: {DEFAULT_BYTES_PER_LINE})')
    parser.add_argument('-n', dest='bytes_to_read', type=int, metavar='<int>', default=None,
                        help='number of bytes to read (default: all)')
    parser.add_argument('-o', dest='offset', type=int, metavar='<int>', default=DEFAULT_OFFSET,
                        help='byte offset at which to begin reading (default: 0)')
    parser.add_argument(*HELP_FLAGS, dest='help', action='store_true',
                        help='display this help text and exit')
    parser.add_argument(VERSION_FLAG, dest='version', action='store_true',
                        help='display version number and exit')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Union[DumpConfig, ExitRequest, ArgumentError]:
    """
    Parse command line arguments into a dump configuration.

    Help and version flags win over everything else on the command line,
    including invalid options.

    Returns:
        DumpConfig to run, ExitRequest when help/version was printed,
        or ArgumentError describing what was wrong
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    if any(arg in HELP_FLAGS for arg in argv):
        parser.print_help()
        return ExitRequest(0)
    if VERSION_FLAG in argv:
        print(VERSION)
        return ExitRequest(0)

    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        return e

    if args.bytes_per_line < 1:
        return ArgumentError("invalid argument for the -l option: must be at least 1")
    if args.offset < 0:
        return ArgumentError("invalid argument for the -o option: must not be negative")

    source = None if args.file in (None, '-') else Path(args.file)
    return DumpConfig(
        bytes_per_line=args.bytes_per_line,
        bytes_to_read=byte_limit(args.bytes_to_read),
        offset=args.offset,
        source=source,
    )


def main(argv: Optional[List[str]] = None) -> int:
    outcome = parse_args(argv)

    if isinstance(outcome, ExitRequest):
        return outcome.code
    if isinstance(outcome, ArgumentError):
        print(f"Error: {outcome.message}", file=sys.stderr)
        return 1

    try:
        result = dump(outcome)
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); keep the shutdown flush quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1

    if not result.ok:
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())
