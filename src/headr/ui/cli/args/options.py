"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from headr.features.prefix import HeadConfig


@final
@dataclass(slots=True)
class HeadArgs:
    """Parsed command line arguments for a headr run."""

    files: list[str]
    lines: int | None
    byte_count: int | None
    verbose: bool

    def to_config(self) -> HeadConfig:
        """Build the immutable run configuration."""

        return HeadConfig.build(self.files, lines=self.lines, byte_count=self.byte_count)


__all__ = ["HeadArgs"]
