"""Command line interface for headr."""

from headr.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
