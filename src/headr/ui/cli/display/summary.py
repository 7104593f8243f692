"""Display utilities for the verbose run summary."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape

from headr.features.prefix import SourceOutcome


@final
class RunSummaryDisplay:
    """Render per-run source outcomes on standard error."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def show_summary(self, outcomes: Sequence[SourceOutcome]) -> None:
        """Print opened and failed counts followed by the failed sources.

        Args:
            outcomes: Outcomes returned by the emitter, in input order.
        """
        opened = [outcome for outcome in outcomes if outcome.opened]
        failed = [outcome for outcome in outcomes if not outcome.opened]
        total_bytes = sum(outcome.bytes_written for outcome in opened)

        self.console.print("\n[bold]Run Summary:[/bold]")
        self.console.print(f"Sources: {len(outcomes)}")
        self.console.print(f"[green]Emitted: {len(opened)} ({total_bytes} bytes)[/green]")
        if not failed:
            return

        self.console.print(f"[red]Failed to open: {len(failed)}[/red]")
        for outcome in failed:
            detail = outcome.message or "unknown error"
            self.console.print(f"[red]  • {escape(outcome.identifier)}: {escape(detail)}[/red]")


__all__ = ["RunSummaryDisplay"]
