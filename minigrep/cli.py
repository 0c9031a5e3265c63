#!/usr/bin/env python3
"""
CLI for minigrep - search files for lines containing a query

Usage:
  minigrep duct poem.txt                  # Case-sensitive search in one file
  minigrep duct ./docs                    # Recursive search in a directory
  CASE_INSENSITIVE=1 minigrep rust ./docs # Case-insensitive search
  minigrep --ignore-case rust ./docs      # Same, via flag
  minigrep --show-skipped rust /etc       # Also report unreadable entries on stderr
  minigrep -- -x notes.txt                # Query starting with "-": put it after --

Extra positional arguments are rejected.

Exit codes: 0 on success (even with no matches), 1 on bad arguments or
when the target cannot be read.
"""

import argparse
import logging
import os
import sys
from typing import Mapping, Optional, Sequence

from rich.console import Console

from .config import config_from_args
from .container import Container
from .core.errors import ConfigError, ScanIoError
from .formatters import format_skipped, render_outcome

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises ConfigError instead of exiting with status 2"""

    def error(self, message: str):  # type: ignore[override]
        raise ConfigError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="minigrep",
        description="minigrep - print lines containing QUERY in a file or directory tree"
    )
    parser.add_argument("query", nargs="?", help="Literal text to search for")
    parser.add_argument("path", nargs="?", help="File or directory to search")
    parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Case-insensitive matching (also enabled by $CASE_INSENSITIVE)"
    )
    parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Report entries that could not be read on stderr"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    stdout: Optional[Console] = None,
    stderr: Optional[Console] = None,
    container: Optional[Container] = None,
) -> int:
    """Parse arguments, run the search and print results. Returns exit code."""
    environ = os.environ if environ is None else environ
    err = stderr or Console(stderr=True, highlight=False, emoji=False)

    try:
        args = build_parser().parse_args(argv)
        config = config_from_args(args, environ)
    except ConfigError as e:
        err.print(f"Problem parsing arguments: {e}", markup=False, soft_wrap=True)
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)

    out = stdout or Console(highlight=False, no_color=args.no_color)
    container = container or Container()

    try:
        outcome = container.search.execute(config)
    except ScanIoError as e:
        err.print(f"Application error: {e}", markup=False, soft_wrap=True)
        return 1

    if outcome.results:
        # Console.print expands tabs and strips control codes; content must stay verbatim
        color = not args.no_color and out.color_system is not None
        out.file.write(render_outcome(outcome, color=color) + "\n")
        out.file.flush()

    if args.show_skipped and outcome.skipped:
        err.print(format_skipped(outcome), markup=False, soft_wrap=True)

    return 0


def main():
    return run()


if __name__ == "__main__":
    sys.exit(main())
