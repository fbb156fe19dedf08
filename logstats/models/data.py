"""Module containing Pydantic models for parsed records and summaries."""

from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from logstats.core.constants import TOP_MESSAGE_SLOTS, ZERO_TIME

class Severity(str, Enum):
    """Severity tokens that are tallied. Matching is case-sensitive."""
    
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

class LogRecord(BaseModel):
    """One successfully parsed log line."""
    
    timestamp: str
    severity: str
    module: str
    function: str
    line_number: int
    message: str
    
    model_config = ConfigDict(frozen=True)

class SeverityFrequency(BaseModel):
    """Counts of records per recognised severity."""
    
    debug: int = Field(default=0, ge=0)
    info: int = Field(default=0, ge=0)
    warning: int = Field(default=0, ge=0)
    error: int = Field(default=0, ge=0)
    
    model_config = ConfigDict(frozen=True)
    
    @classmethod
    def from_records(cls, records: Iterable[LogRecord]) -> "SeverityFrequency":
        """Tally records by severity, ignoring unrecognised tokens.
        
        Args:
            records: Parsed log records
            
        Returns:
            Severity counts
        """
        counts = {severity.value: 0 for severity in Severity}
        for record in records:
            if record.severity in counts:
                counts[record.severity] += 1
        return cls(
            debug=counts[Severity.DEBUG.value],
            info=counts[Severity.INFO.value],
            warning=counts[Severity.WARNING.value],
            error=counts[Severity.ERROR.value],
        )
    
    def get(self, severity: Severity) -> int:
        """Return the count for one severity."""
        return getattr(self, severity.value.lower())
    
    def __add__(self, other: "SeverityFrequency") -> "SeverityFrequency":
        if not isinstance(other, SeverityFrequency):
            return NotImplemented
        return SeverityFrequency(
            debug=self.debug + other.debug,
            info=self.info + other.info,
            warning=self.warning + other.warning,
            error=self.error + other.error,
        )

class MessageFrequency(BaseModel):
    """A message and how many times it occurred."""
    
    message: str = ""
    frequency: int = Field(default=0, ge=0)
    
    model_config = ConfigDict(frozen=True)
    
    @property
    def is_placeholder(self) -> bool:
        """Padding slots carry a zero frequency."""
        return self.frequency == 0

def pad_top_messages(
    ranked: List[MessageFrequency],
    slots: int = TOP_MESSAGE_SLOTS
) -> List[MessageFrequency]:
    """Truncate or pad a ranking to exactly ``slots`` entries.
    
    Args:
        ranked: Messages ordered by rank
        slots: Number of slots to return
        
    Returns:
        List of exactly ``slots`` entries, padded with empty placeholders
    """
    top = list(ranked[:slots])
    top.extend(MessageFrequency() for _ in range(slots - len(top)))
    return top

class FileSummary(BaseModel):
    """Aggregated statistics for a single log file.
    
    ``start_time`` and ``end_time`` come from the first and last parsed
    records in file order, not from sorting by time.
    """
    
    path: str
    num_entries: int = Field(default=0, ge=0)
    severity_frequency: SeverityFrequency = Field(default_factory=SeverityFrequency)
    top_messages: List[MessageFrequency] = Field(default_factory=lambda: pad_top_messages([]))
    start_time: datetime = ZERO_TIME
    end_time: datetime = ZERO_TIME
    read_error: Optional[str] = None
    
    model_config = ConfigDict(frozen=True)
    
    @classmethod
    def empty(cls, path: str, read_error: Optional[str] = None) -> "FileSummary":
        """Summary for a file with no parseable records.
        
        Args:
            path: Path of the log file
            read_error: Reason the file could not be read, if any
            
        Returns:
            Zero-valued summary
        """
        return cls(path=path, read_error=read_error)
    
    def ranked_messages(self) -> List[MessageFrequency]:
        """Top messages without placeholder slots."""
        return [slot for slot in self.top_messages if not slot.is_placeholder]

class GlobalSummary(BaseModel):
    """Statistics reduced across every analyzed file."""
    
    num_files: int = Field(default=0, ge=0)
    num_entries: int = Field(default=0, ge=0)
    severity_frequency: SeverityFrequency = Field(default_factory=SeverityFrequency)
    top_messages: List[MessageFrequency] = Field(default_factory=lambda: pad_top_messages([]))
    start_time: datetime = ZERO_TIME
    end_time: datetime = ZERO_TIME
    unreadable_files: List[str] = Field(default_factory=list)
    
    model_config = ConfigDict(frozen=True)
    
    def ranked_messages(self) -> List[MessageFrequency]:
        """Top messages without placeholder slots."""
        return [slot for slot in self.top_messages if not slot.is_placeholder]
