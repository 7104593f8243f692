"""Command line argument handling package."""

from headr.ui.cli.args.options import HeadArgs
from headr.ui.cli.args.parser import ArgumentParser, parse_non_negative_int, parse_positive_int

__all__ = ["ArgumentParser", "HeadArgs", "parse_non_negative_int", "parse_positive_int"]
