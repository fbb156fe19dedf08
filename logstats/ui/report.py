"""Plain-text report of a global summary."""

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.markup import escape

from logstats.models.data import GlobalSummary, Severity

def format_timestamp(value: datetime) -> str:
    """Format an instant in the input layout, ``YYYY-MM-DD HH:MM:SS.fff``."""
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}."
        f"{value.microsecond // 1000:03d}"
    )

def render_summary(
    summary: GlobalSummary,
    console: Optional[Console] = None,
    show_counts: bool = False
) -> None:
    """Print a global summary.
    
    Args:
        summary: Summary to print
        console: Rich console to print to, stdout by default
        show_counts: Append each top message's frequency
    """
    console = console or Console(soft_wrap=True, highlight=False)
    
    def emit(text: str) -> None:
        # Log messages are user data, not rich markup
        console.print(text, markup=False, highlight=False)
    
    for path in summary.unreadable_files:
        console.print(f"[yellow]Warning:[/yellow] could not read {escape(path)}", highlight=False)
    
    emit(f"Number of Entries: {summary.num_entries}")
    emit("Log Severity Frequency:")
    for severity in Severity:
        emit(f"   {severity.value}: {summary.severity_frequency.get(severity)}")
    emit("Top Five Log Messages:")
    for rank, slot in enumerate(summary.ranked_messages(), start=1):
        line = f"   {rank}. {slot.message}"
        if show_counts:
            line += f" ({slot.frequency})"
        emit(line)
    emit(f"Start Date/Time: {format_timestamp(summary.start_time)}")
    emit(f"End Date/Time: {format_timestamp(summary.end_time)}")
