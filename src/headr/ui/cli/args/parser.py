"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from headr import __version__
from headr.config import Config
from headr.features.prefix.domain.models import DEFAULT_LINE_COUNT, STDIN_IDENTIFIER
from headr.platform.logging import setup_logger
from headr.ui.cli.args.options import HeadArgs


def parse_positive_int(value: str) -> int:
    """Parse a strictly positive integer.

    Raises:
        ValueError: If ``value`` is not a base-10 integer greater than zero.
    """
    try:
        number = int(value)
    except ValueError:
        raise ValueError(value) from None
    if number <= 0:
        raise ValueError(value)
    return number


def parse_non_negative_int(value: str) -> int:
    """Parse an integer that may be zero but not negative."""

    try:
        number = int(value)
    except ValueError:
        raise ValueError(value) from None
    if number < 0:
        raise ValueError(value)
    return number


def _line_count(value: str) -> int:
    try:
        return parse_positive_int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line count: '{value}'") from None


def _byte_count(value: str) -> int:
    try:
        return parse_non_negative_int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid byte count: '{value}'") from None


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="headr",
            description="Print the first lines or bytes of each FILE to standard output.",
            epilog="With no FILE, or when FILE is -, read standard input.",
        )
        _ = parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Files to read (default: standard input)",
        )

        selection = parser.add_mutually_exclusive_group()
        _ = selection.add_argument(
            "-n",
            "--number",
            "--lines",
            dest="lines",
            type=_line_count,
            metavar="N",
            help=f"Print the first N lines (default: {DEFAULT_LINE_COUNT})",
        )
        _ = selection.add_argument(
            "-c",
            "--bytes",
            dest="byte_count",
            type=_byte_count,
            metavar="N",
            help="Print the first N bytes",
        )

        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log per-file progress and a run summary to standard error",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> HeadArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            HeadArgs: Processed command line arguments.

        Raises:
            SystemExit: If the arguments are malformed or conflicting.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return HeadArgs(
            files=list(parsed_args.files) or [STDIN_IDENTIFIER],
            lines=parsed_args.lines,
            byte_count=parsed_args.byte_count,
            verbose=parsed_args.verbose,
        )
