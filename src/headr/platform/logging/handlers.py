"""Rich console handler rendering structured source events."""

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.style import Style
from rich.logging import RichHandler
from rich.text import Text


class SourceRichHandler(RichHandler):
    """Rich handler that renders per-source events with icons and compact paths."""

    _SOURCE_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "source.open": ("📂", "cyan"),
        "source.drained": ("✅", "green"),
        "source.open.error": ("⛔", "red"),
        "run.aborted": ("❌", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "source.open": "Opened ",
        "source.drained": "Drained ",
        "source.open.error": "Cannot open ",
        "run.aborted": "Aborted at ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments.

        Args:
            path: Source identifier; ``-`` is rendered as ``<stdin>``.

        Returns:
            Text: Styled path with magenta separators.
        """
        if path == "-":
            return Text("<stdin>", style=Style(color="white", italic=True))

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        display = ""
        if len(body_parts) > self._PATH_SEGMENT_LIMIT:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display = "…" + separator
        elif anchor:
            display = anchor.rstrip("\\/") + separator if isinstance(pure_path, PureWindowsPath) else separator
        display += separator.join(body_parts)

        text = Text()
        for char in display or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_source_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured source events, or ``None`` for plain records."""

        event = getattr(record, "source_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._SOURCE_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        sequence = getattr(record, "sequence", None)
        total = getattr(record, "total_sources", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._EVENT_LABELS.get(event, ""))
        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        details: list[str] = []
        bytes_written = getattr(record, "bytes_written", None)
        if event == "source.drained" and isinstance(bytes_written, int):
            details.append(f"{bytes_written} bytes")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        source_text = self._render_source_message(record)
        if source_text is not None:
            return source_text
        return super().render_message(record, message)


__all__ = ["SourceRichHandler"]
