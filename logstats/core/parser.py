"""Parser turning one raw log line into a structured record.

Only one grammar is supported::

    <timestamp> | <severity> | <module>:<function>:<lineNumber> - <message>

The message may itself contain ``:`` and ``-``; only the first occurrences
after the severity are treated as delimiters.
"""

import re
from typing import Optional

from logstats.core.constants import (
    FIELD_SEPARATOR,
    LOCATION_SEPARATOR,
    MAX_LINE_NUMBER,
    MESSAGE_SEPARATOR,
    MIN_LINE_NUMBER,
)
from logstats.core.errors import (
    InvalidLineNumberError,
    MalformedLineError,
    ParsingError,
)
from logstats.models.data import LogRecord

_LINE_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")

def _parse_line_number(raw: str) -> int:
    """Parse a decimal line number that must fit in a signed 16-bit integer."""
    value = raw.strip()
    if not _LINE_NUMBER_PATTERN.fullmatch(value):
        raise InvalidLineNumberError(
            "Line number is not a decimal integer",
            details={"line_number": value}
        )
    line_number = int(value)
    if not MIN_LINE_NUMBER <= line_number <= MAX_LINE_NUMBER:
        raise InvalidLineNumberError(
            "Line number out of range",
            details={
                "line_number": value,
                "min": MIN_LINE_NUMBER,
                "max": MAX_LINE_NUMBER
            }
        )
    return line_number

def parse_line(line: str) -> LogRecord:
    """Parse a single log line.
    
    Args:
        line: Raw text of one log line, without the record separator
        
    Returns:
        The parsed record
        
    Raises:
        MalformedLineError: If the line does not follow the grammar
        InvalidLineNumberError: If the line number is not a 16-bit integer
    """
    segments = line.split(FIELD_SEPARATOR)
    if len(segments) != 3:
        raise MalformedLineError(
            "Expected 3 '|' separated fields",
            details={"fields": len(segments)}
        )
    raw_timestamp, raw_severity, remainder = segments
    
    timestamp = raw_timestamp.strip()
    severity = raw_severity.strip()
    if not severity:
        raise MalformedLineError("Missing severity")
    if not timestamp:
        raise MalformedLineError("Missing timestamp")
    
    # module:function:rest, where rest keeps any further colons
    location = remainder.split(LOCATION_SEPARATOR, 2)
    if len(location) < 3:
        raise MalformedLineError(
            "Expected <module>:<function>:<lineNumber>",
            details={"segments": len(location)}
        )
    module, function, line_and_message = location
    
    parts = line_and_message.split(MESSAGE_SEPARATOR, 1)
    if len(parts) < 2:
        raise MalformedLineError("Missing '-' between line number and message")
    raw_line_number, raw_message = parts
    
    return LogRecord(
        timestamp=timestamp,
        severity=severity,
        module=module.strip(),
        function=function.strip(),
        line_number=_parse_line_number(raw_line_number),
        message=raw_message.strip(),
    )

def try_parse_line(line: str) -> Optional[LogRecord]:
    """Parse a line, returning None instead of raising on bad input."""
    try:
        return parse_line(line)
    except ParsingError:
        return None
