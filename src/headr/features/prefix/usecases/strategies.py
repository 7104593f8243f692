"""
Summary: Byte-limited and line-limited prefix readers over buffered binary streams.
Why: Isolate the two selection strategies from output and error routing.
"""

from __future__ import annotations

from collections.abc import Iterator
from io import DEFAULT_BUFFER_SIZE
from typing import BinaryIO, Final

TEXT_ENCODING: Final[str] = "utf-8"
READ_CHUNK_SIZE: Final[int] = DEFAULT_BUFFER_SIZE * 16


def decode_lossy(data: bytes) -> str:
    """Decode ``data`` replacing invalid sequences with U+FFFD."""

    return data.decode(TEXT_ENCODING, errors="replace")


def to_output_bytes(data: bytes) -> bytes:
    """Lossily decode ``data`` and re-encode it as UTF-8 for output."""

    return decode_lossy(data).encode(TEXT_ENCODING)


def read_byte_prefix(stream: BinaryIO, limit: int) -> bytes:
    """Read at most ``limit`` bytes from ``stream``.

    Reads in bounded chunks so a huge limit on a short source never
    allocates the full limit. Shorter sources yield everything they hold;
    a limit of zero reads nothing.
    """
    chunks: list[bytes] = []
    remaining = limit
    while remaining > 0:
        chunk = stream.read(min(remaining, READ_CHUNK_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def iter_line_prefix(stream: BinaryIO, limit: int) -> Iterator[bytes]:
    """Yield up to ``limit`` lines from ``stream`` with their terminators.

    A final line without a terminator is still yielded and counts as a line.
    Iteration stops early once the stream is exhausted.
    """
    for _ in range(limit):
        line = stream.readline()
        if not line:
            return
        yield line


__all__ = [
    "READ_CHUNK_SIZE",
    "TEXT_ENCODING",
    "decode_lossy",
    "to_output_bytes",
    "iter_line_prefix",
    "read_byte_prefix",
]
