"""Head command implementation for the CLI."""

from __future__ import annotations

from typing import final

from headr.features.prefix import PrefixEmitter, SourceOutcome
from headr.ui.cli.args.options import HeadArgs
from headr.ui.cli.display.summary import RunSummaryDisplay


@final
class HeadCommand:
    """Command that emits the prefix of every requested source."""

    args: HeadArgs
    emitter: PrefixEmitter
    display: RunSummaryDisplay

    def __init__(self, args: HeadArgs) -> None:
        self.args = args
        self.emitter = PrefixEmitter()
        self.display = RunSummaryDisplay()

    def execute(self) -> list[SourceOutcome]:
        """Execute the command.

        Returns:
            List of per-source outcomes.

        Raises:
            SourceReadError: If an opened source cannot be read.
        """
        outcomes = self.emitter.run(self.args.to_config())
        if self.args.verbose:
            self.display.show_summary(outcomes)
        return outcomes
