"""Filesystem and standard-input adapter that opens sources for reading."""

from __future__ import annotations

import sys
from types import TracebackType
from typing import BinaryIO, final

from ..domain.models import STDIN_IDENTIFIER, SourceOpenError


@final
class SourceHandle:
    """Buffered, sequentially readable stream bound to one source identifier."""

    identifier: str
    stream: BinaryIO
    _owns_stream: bool

    def __init__(self, identifier: str, stream: BinaryIO, *, owns_stream: bool = True) -> None:
        self.identifier = identifier
        self.stream = stream
        self._owns_stream = owns_stream

    def close(self) -> None:
        """Release the handle; the process's standard input stays open."""

        if self._owns_stream:
            self.stream.close()

    def __enter__(self) -> "SourceHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def open_source(identifier: str) -> SourceHandle:
    """Open ``identifier`` for buffered binary reading.

    Args:
        identifier: ``-`` for standard input, otherwise a file path.

    Returns:
        SourceHandle: Handle owning the opened stream.

    Raises:
        SourceOpenError: If the file is missing, unreadable or a directory.
    """
    if identifier == STDIN_IDENTIFIER:
        return SourceHandle(identifier, sys.stdin.buffer, owns_stream=False)

    try:
        stream = open(identifier, "rb")
    except OSError as exc:
        raise SourceOpenError.from_os_error(identifier, exc) from exc
    return SourceHandle(identifier, stream)


__all__ = ["SourceHandle", "open_source"]
