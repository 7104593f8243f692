"""Adapters for the prefix feature."""

from .source_opener import SourceHandle, open_source

__all__ = ["SourceHandle", "open_source"]
