"""Models package for parsed records and summaries."""

from .data import (
    FileSummary,
    GlobalSummary,
    LogRecord,
    MessageFrequency,
    Severity,
    SeverityFrequency,
    pad_top_messages,
)

__all__ = [
    'FileSummary',
    'GlobalSummary',
    'LogRecord',
    'MessageFrequency',
    'Severity',
    'SeverityFrequency',
    'pad_top_messages',
]
