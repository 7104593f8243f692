"""
Summary: Value objects describing a prefix run and the errors it can raise.
Why: Keep the selection invariant structural so byte and line modes never coexist.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

STDIN_IDENTIFIER: Final[str] = "-"
DEFAULT_LINE_COUNT: Final[int] = 10


@dataclass(slots=True, frozen=True)
class LineCount:
    """Select the first ``limit`` newline-delimited lines of a source."""

    limit: int = DEFAULT_LINE_COUNT

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError(f"Line count must be positive, got {self.limit}")


@dataclass(slots=True, frozen=True)
class ByteCount:
    """Select the first ``limit`` bytes of a source."""

    limit: int

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"Byte count must not be negative, got {self.limit}")


Selection = LineCount | ByteCount


@dataclass(slots=True, frozen=True)
class HeadConfig:
    """Immutable description of a single run."""

    sources: tuple[str, ...] = (STDIN_IDENTIFIER,)
    selection: Selection = LineCount()

    @classmethod
    def build(
        cls,
        sources: Sequence[str] | None = None,
        *,
        lines: int | None = None,
        byte_count: int | None = None,
    ) -> "HeadConfig":
        """Create a configuration from loose values.

        Args:
            sources: Source identifiers; an empty or missing list means standard input.
            lines: Line limit, if line mode was requested explicitly.
            byte_count: Byte limit, if byte mode was requested.

        Raises:
            ValueError: If both limits are supplied or a limit is out of range.
        """
        if lines is not None and byte_count is not None:
            raise ValueError("Byte and line counts are mutually exclusive")

        selection: Selection
        if byte_count is not None:
            selection = ByteCount(byte_count)
        elif lines is not None:
            selection = LineCount(lines)
        else:
            selection = LineCount()

        resolved = tuple(sources) if sources else (STDIN_IDENTIFIER,)
        return cls(sources=resolved, selection=selection)


class SourceStatus(str, Enum):
    """Terminal state of a single source after the emitter visits it."""

    DRAINED = "drained"
    OPEN_FAILED = "open_failed"


@dataclass(slots=True, frozen=True)
class SourceOutcome:
    """Transient per-source diagnostic returned by a run."""

    identifier: str
    status: SourceStatus
    bytes_written: int = 0
    message: str | None = None

    @property
    def opened(self) -> bool:
        return self.status is SourceStatus.DRAINED


class HeadError(Exception):
    """Base class for errors raised while emitting prefixes."""


class SourceOpenError(HeadError):
    """A source could not be opened; recoverable per source."""

    identifier: str
    message: str

    def __init__(self, identifier: str, message: str) -> None:
        super().__init__(f"{identifier}: {message}")
        self.identifier = identifier
        self.message = message

    @classmethod
    def from_os_error(cls, identifier: str, error: OSError) -> "SourceOpenError":
        """Build the error from an ``OSError`` using the platform message."""

        return cls(identifier, error.strerror or str(error))


class SourceReadError(HeadError):
    """Reading an already open source failed; aborts the whole run."""

    identifier: str

    def __init__(self, identifier: str, cause: OSError) -> None:
        detail = cause.strerror or str(cause)
        super().__init__(f"{identifier}: {detail}")
        self.identifier = identifier


__all__ = [
    "ByteCount",
    "DEFAULT_LINE_COUNT",
    "HeadConfig",
    "HeadError",
    "LineCount",
    "STDIN_IDENTIFIER",
    "Selection",
    "SourceOpenError",
    "SourceOutcome",
    "SourceReadError",
    "SourceStatus",
]
