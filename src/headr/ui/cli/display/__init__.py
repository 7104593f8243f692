"""Display components for the CLI."""

from headr.ui.cli.display.summary import RunSummaryDisplay

__all__ = ["RunSummaryDisplay"]
