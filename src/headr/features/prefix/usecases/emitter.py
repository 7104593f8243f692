"""
Summary: Prefix emitter that walks sources in order and writes their leading content.
Why: Open failures stay isolated per source while read failures abort the run.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from logging import Logger, getLogger
from typing import BinaryIO, TextIO

from ..adapters.source_opener import SourceHandle, open_source
from ..domain.models import (
    ByteCount,
    HeadConfig,
    SourceOpenError,
    SourceOutcome,
    SourceReadError,
    SourceStatus,
)
from .strategies import TEXT_ENCODING, iter_line_prefix, read_byte_prefix, to_output_bytes

SourceOpener = Callable[[str], SourceHandle]


def format_header(identifier: str, index: int) -> str:
    """Return the banner printed before a source when several are given.

    Every banner after the first is preceded by a blank line.
    """
    separator = "\n" if index > 0 else ""
    return f"{separator}==> {identifier} <==\n"


class PrefixEmitter:
    """Write the requested prefix of every configured source to standard output."""

    _opener: SourceOpener
    _stdout: BinaryIO | None
    _stderr: TextIO | None
    _logger: Logger

    def __init__(
        self,
        *,
        opener: SourceOpener = open_source,
        stdout: BinaryIO | None = None,
        stderr: TextIO | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._opener = opener
        self._stdout = stdout
        self._stderr = stderr
        self._logger = logger or getLogger(__name__)

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def run(self, config: HeadConfig) -> list[SourceOutcome]:
        """Emit the prefix of each source in ``config``.

        Args:
            config: Sources and selection for this run.

        Returns:
            list[SourceOutcome]: One outcome per processed source, in input order.

        Raises:
            SourceReadError: If reading an opened source fails. Remaining
                sources are not processed.
        """
        total = len(config.sources)
        outcomes: list[SourceOutcome] = []

        for index, identifier in enumerate(config.sources):
            log_extra = {"sequence": index + 1, "total_sources": total, "source_path": identifier}
            try:
                handle = self._opener(identifier)
            except SourceOpenError as exc:
                self._report_open_failure(exc)
                self._logger.debug(
                    "Cannot open %s: %s",
                    identifier,
                    exc.message,
                    extra={"source_event": "source.open.error", "error_message": exc.message, **log_extra},
                )
                outcomes.append(
                    SourceOutcome(
                        identifier=identifier,
                        status=SourceStatus.OPEN_FAILED,
                        message=exc.message,
                    )
                )
                continue

            self._logger.debug(
                "Opened %s",
                identifier,
                extra={"source_event": "source.open", **log_extra},
            )
            with handle:
                if total > 1:
                    header = format_header(identifier, index)
                    self._write(header.encode(TEXT_ENCODING, errors="surrogateescape"))
                try:
                    written = self._emit(handle, config)
                except SourceReadError as exc:
                    self._logger.debug(
                        "Aborting run while reading %s",
                        identifier,
                        extra={"source_event": "run.aborted", "error_message": str(exc), **log_extra},
                    )
                    raise

            self._logger.debug(
                "Drained %s",
                identifier,
                extra={"source_event": "source.drained", "bytes_written": written, **log_extra},
            )
            outcomes.append(
                SourceOutcome(
                    identifier=identifier,
                    status=SourceStatus.DRAINED,
                    bytes_written=written,
                )
            )

        return outcomes

    def _emit(self, handle: SourceHandle, config: HeadConfig) -> int:
        """Copy the selected prefix of ``handle`` and return the bytes consumed."""

        selection = config.selection
        if isinstance(selection, ByteCount):
            return self._emit_bytes(handle, selection.limit)
        return self._emit_lines(handle, selection.limit)

    def _emit_bytes(self, handle: SourceHandle, limit: int) -> int:
        try:
            data = read_byte_prefix(handle.stream, limit)
        except OSError as exc:
            raise SourceReadError(handle.identifier, exc) from exc
        self._write(to_output_bytes(data))
        return len(data)

    def _emit_lines(self, handle: SourceHandle, limit: int) -> int:
        consumed = 0
        for line in _guard_reads(handle.identifier, iter_line_prefix(handle.stream, limit)):
            consumed += len(line)
            self._write(to_output_bytes(line))
        return consumed

    def _write(self, data: bytes) -> None:
        if not data:
            return
        _ = self.stdout.write(data)
        self.stdout.flush()

    def _report_open_failure(self, error: SourceOpenError) -> None:
        _ = self.stderr.write(f"{error}\n")
        self.stderr.flush()


def _guard_reads(identifier: str, lines: Iterator[bytes]) -> Iterator[bytes]:
    """Re-raise I/O failures from ``lines`` as ``SourceReadError``."""

    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except OSError as exc:
            raise SourceReadError(identifier, exc) from exc
        yield line


__all__ = ["PrefixEmitter", "SourceOpener", "format_header"]
