"""Module for centralized error handling."""

from typing import Optional, Any, Dict
from rich.console import Console
from rich.markup import escape
from functools import wraps
from typing import Type, Tuple, Callable
import logging

# Diagnostics go to stderr so they never mix with the report
console = Console(stderr=True)

# Define error codes
ERROR_CODES = {
    'CONFIG_ERROR': 1000,
    'FILE_ERROR': 2000,
    'PARSING_ERROR': 3000,
    'MALFORMED_LINE': 3001,
    'INVALID_LINE_NUMBER': 3002,
    'TIMESTAMP_FORMAT_ERROR': 4000,
    'EMPTY_BATCH': 5000,
}

class LogStatsError(Exception):
    """Base exception class for logstats."""
    
    def __init__(
        self,
        message: str,
        error_code: int,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize error.
        
        Args:
            message: Error message
            error_code: Numeric error code
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}

class ConfigError(LogStatsError):
    """Configuration-related errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ERROR_CODES['CONFIG_ERROR'], details)

class FileError(LogStatsError):
    """A log file could not be opened or decoded."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ERROR_CODES['FILE_ERROR'], details)

class ParsingError(LogStatsError):
    """A single log line could not be turned into a record.

    Always recovered by dropping the line.
    """
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: int = ERROR_CODES['PARSING_ERROR']
    ):
        super().__init__(message, error_code, details)

class MalformedLineError(ParsingError):
    """The line does not follow the expected grammar."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, ERROR_CODES['MALFORMED_LINE'])

class InvalidLineNumberError(ParsingError):
    """The line number is not a decimal integer in the signed 16-bit range."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, ERROR_CODES['INVALID_LINE_NUMBER'])

class TimestampFormatError(LogStatsError):
    """A parsed record carries a timestamp that does not match the layout.

    The line parser only checks that the timestamp is present, so this
    surfaces when a file summary is built and aborts the run.
    """
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ERROR_CODES['TIMESTAMP_FORMAT_ERROR'], details)

class EmptyBatchError(LogStatsError):
    """No file summaries were supplied for reduction."""
    def __init__(self, message: str = "No log files to analyze", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ERROR_CODES['EMPTY_BATCH'], details)

def report_error(error: Exception) -> None:
    """Print a diagnostic for an error without a stack trace.
    
    Args:
        error: The exception to report
    """
    if isinstance(error, LogStatsError):
        console.print(f"[red]Error {error.error_code}:[/red] {escape(str(error))}")
        if error.details:
            console.print("[yellow]Details:[/yellow]")
            for key, value in error.details.items():
                console.print(f"  [blue]{key}:[/blue] {escape(str(value))}")
    else:
        console.print(f"[red]Unexpected Error:[/red] {escape(str(error))}")

def error_handler(reraise: bool = True, exclude: Tuple[Type[Exception], ...] = ()):
    """Decorator for handling errors in functions.
    
    Args:
        reraise: Whether to reraise the exception after handling
        exclude: Tuple of exception types to exclude from handling
        
    Returns:
        Decorated function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if exclude and isinstance(e, exclude):
                    raise
                
                report_error(e)
                
                # Log the error
                logger = logging.getLogger(__name__)
                logger.error(
                    "Error occurred: %s",
                    e,
                    extra={
                        "error_code": getattr(e, "error_code", None),
                        "details": getattr(e, "details", None)
                    }
                )
                
                if reraise:
                    raise
                
            return None
        return wrapper
    return decorator
