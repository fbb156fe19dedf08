"""Concurrent statistics over structured application log files."""

from logstats.core.aggregator import aggregate_file
from logstats.core.dispatcher import FileAnalysisDispatcher, analyze_files
from logstats.core.parser import parse_line
from logstats.core.reducer import reduce_summaries
from logstats.models import FileSummary, GlobalSummary, LogRecord, SeverityFrequency

__version__ = "0.1.0"

__all__ = [
    'FileAnalysisDispatcher',
    'FileSummary',
    'GlobalSummary',
    'LogRecord',
    'SeverityFrequency',
    'aggregate_file',
    'analyze_files',
    'parse_line',
    'reduce_summaries',
]
