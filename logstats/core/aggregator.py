"""Per-file aggregation of parsed log records into a summary."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Sequence, Union

from logstats.core.constants import (
    DEFAULT_ENCODING,
    RECORD_SEPARATOR,
    TIMESTAMP_FORMAT,
    TIMESTAMP_FORMAT_NO_FRACTION,
    TIMESTAMP_PATTERN,
    TOP_MESSAGE_SLOTS,
)
from logstats.core.errors import FileError, ParsingError, TimestampFormatError
from logstats.core.parser import parse_line
from logstats.models.data import (
    FileSummary,
    LogRecord,
    MessageFrequency,
    SeverityFrequency,
    pad_top_messages,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def parse_timestamp(value: str) -> datetime:
    """Parse a record timestamp in the fixed ``YYYY-MM-DD HH:MM:SS.fff`` layout.
    
    The fractional seconds are optional.
    
    Args:
        value: Timestamp text as stored on the record
        
    Returns:
        Naive datetime
        
    Raises:
        TimestampFormatError: If the text does not match the layout
    """
    # strptime alone would accept unpadded fields such as "2024-1-2 3:4:5"
    if TIMESTAMP_PATTERN.fullmatch(value):
        for layout in (TIMESTAMP_FORMAT, TIMESTAMP_FORMAT_NO_FRACTION):
            try:
                return datetime.strptime(value, layout)
            except ValueError:
                continue
    raise TimestampFormatError(
        "Unable to parse timestamp",
        details={"timestamp": value}
    )

def rank_messages(
    counts: Dict[str, int],
    limit: int = TOP_MESSAGE_SLOTS
) -> List[MessageFrequency]:
    """Rank messages by descending count.
    
    ``counts`` must iterate in first-encountered order; ``sorted`` is stable
    so equal counts keep that order.
    
    Args:
        counts: Message counts keyed by message, in first-seen order
        limit: Number of slots to return
        
    Returns:
        Exactly ``limit`` slots, padded with placeholders
    """
    first_seen = list(counts.items())
    ranked = sorted(first_seen, key=lambda item: item[1], reverse=True)
    return pad_top_messages(
        [MessageFrequency(message=message, frequency=count) for message, count in ranked],
        limit
    )

def top_messages(
    records: Sequence[LogRecord],
    limit: int = TOP_MESSAGE_SLOTS
) -> List[MessageFrequency]:
    """Most frequent messages of a record list.
    
    Args:
        records: Records in file order
        limit: Number of slots to return
        
    Returns:
        Exactly ``limit`` slots, ties broken by first appearance
    """
    counts: Dict[str, int] = {}
    for record in records:
        counts[record.message] = counts.get(record.message, 0) + 1
    return rank_messages(counts, limit)

def count_severities(records: Sequence[LogRecord]) -> SeverityFrequency:
    """Tally records by recognised severity."""
    return SeverityFrequency.from_records(records)

def read_records(path: PathLike, encoding: str = DEFAULT_ENCODING) -> List[LogRecord]:
    """Read a log file and parse every line, dropping the ones that fail.
    
    Args:
        path: Log file to read
        encoding: Text encoding of the file
        
    Returns:
        Parsed records in file order
        
    Raises:
        FileError: If the file cannot be opened or read
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise FileError(
            "Unable to read log file",
            details={"path": str(path), "error": str(e)}
        ) from e
    
    # Undecodable bytes only alter the affected line; only "\n" separates records
    content = raw.decode(encoding, errors="replace")
    
    records: List[LogRecord] = []
    skipped = 0
    for index, line in enumerate(content.split(RECORD_SEPARATOR), start=1):
        try:
            records.append(parse_line(line))
        except ParsingError as e:
            skipped += 1
            logger.debug(f"Skipping {path}:{index}: {e} {e.details or ''}")
    
    if skipped:
        logger.debug(f"Dropped {skipped} unparseable lines from {path}")
    return records

def summarize_records(path: PathLike, records: Sequence[LogRecord]) -> FileSummary:
    """Build a file summary from already parsed records.
    
    Args:
        path: Path the records were read from
        records: Records in file order
        
    Returns:
        Summary of the records
        
    Raises:
        TimestampFormatError: If the first or last record's timestamp is malformed
    """
    if not records:
        return FileSummary.empty(str(path))
    
    return FileSummary(
        path=str(path),
        num_entries=len(records),
        severity_frequency=count_severities(records),
        top_messages=top_messages(records),
        start_time=parse_timestamp(records[0].timestamp),
        end_time=parse_timestamp(records[-1].timestamp),
    )

def aggregate_file(path: PathLike, encoding: str = DEFAULT_ENCODING) -> FileSummary:
    """Read, parse and summarize one log file.
    
    A file that cannot be read yields an empty summary carrying the read
    error, so the rest of the batch still completes.
    
    Args:
        path: Log file to analyze
        encoding: Text encoding of the file
        
    Returns:
        Summary of the file
        
    Raises:
        TimestampFormatError: If a boundary record has a malformed timestamp
    """
    try:
        records = read_records(path, encoding)
    except FileError as e:
        logger.warning(f"Error reading {path}: {e.details.get('error')}")
        return FileSummary.empty(str(path), read_error=e.details.get("error"))
    
    summary = summarize_records(path, records)
    logger.info(f"Analyzed {path}: {summary.num_entries} entries")
    return summary
