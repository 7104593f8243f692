"""
Summary: Public surface for the prefix feature.
Why: Give the CLI one import path for models, errors and the emitter.
"""

from .adapters.source_opener import SourceHandle, open_source
from .domain.models import (
    ByteCount,
    HeadConfig,
    HeadError,
    LineCount,
    Selection,
    SourceOpenError,
    SourceOutcome,
    SourceReadError,
    SourceStatus,
)
from .usecases.emitter import PrefixEmitter, format_header

__all__ = [
    "ByteCount",
    "HeadConfig",
    "HeadError",
    "LineCount",
    "PrefixEmitter",
    "Selection",
    "SourceOpenError",
    "SourceOutcome",
    "SourceHandle",
    "SourceReadError",
    "SourceStatus",
    "format_header",
    "open_source",
]
