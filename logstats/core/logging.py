"""Logging configuration for logstats."""

import logging
import sys
from typing import Any, Callable
import time
from functools import wraps

import structlog
from structlog.types import Processor
from structlog.stdlib import ProcessorFormatter

def setup_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Setup structured logging using structlog.
    
    Logs are written to stderr so that they never interleave with the
    printed summary on stdout.
    
    Args:
        level: Logging level
        json_logs: Render log events as JSON instead of console text
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    
    # Remove any existing handlers so repeated setup does not duplicate output
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)

def log_duration(logger: structlog.stdlib.BoundLogger) -> Callable:
    """Decorator to log function duration.
    
    Args:
        logger: Logger instance to use
        
    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                duration_ms = (time.time() - start) * 1000
                logger.info(
                    "function_completed",
                    function=func.__name__,
                    duration_ms=round(duration_ms, 3)
                )
        return wrapper
    return decorator
