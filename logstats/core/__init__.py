"""Core parsing, aggregation and error handling."""

from .errors import (
    error_handler,
    ConfigError,
    EmptyBatchError,
    FileError,
    InvalidLineNumberError,
    LogStatsError,
    MalformedLineError,
    ParsingError,
    TimestampFormatError,
)

__all__ = [
    'error_handler',
    'ConfigError',
    'EmptyBatchError',
    'FileError',
    'InvalidLineNumberError',
    'LogStatsError',
    'MalformedLineError',
    'ParsingError',
    'TimestampFormatError',
]
