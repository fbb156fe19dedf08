"""Merge per-file summaries into one global summary.

Top messages are re-ranked from each file's own top slots only, so a
message that never reaches the top of any single file cannot appear in the
global ranking even when its combined count is the highest. The global
ranking is an approximation bounded by that per-file truncation.
"""

import logging
from typing import Dict, List, Sequence

from logstats.core.aggregator import rank_messages
from logstats.core.constants import TOP_MESSAGE_SLOTS, ZERO_TIME
from logstats.core.errors import EmptyBatchError
from logstats.models.data import (
    FileSummary,
    GlobalSummary,
    MessageFrequency,
    SeverityFrequency,
)

logger = logging.getLogger(__name__)

def merge_top_messages(
    summaries: Sequence[FileSummary],
    limit: int = TOP_MESSAGE_SLOTS
) -> List[MessageFrequency]:
    """Sum each file's top message slots and re-rank them.
    
    Summaries are scanned in the order given; that order breaks ties.
    
    Args:
        summaries: Per-file summaries in input order
        limit: Number of slots to return
        
    Returns:
        Exactly ``limit`` slots, padded with placeholders
    """
    totals: Dict[str, int] = {}
    for summary in summaries:
        for slot in summary.top_messages:
            if slot.is_placeholder:
                continue
            totals[slot.message] = totals.get(slot.message, 0) + slot.frequency
    return rank_messages(totals, limit)

def reduce_summaries(summaries: Sequence[FileSummary]) -> GlobalSummary:
    """Reduce per-file summaries into a global summary.
    
    Args:
        summaries: Per-file summaries in input order
        
    Returns:
        Global summary
        
    Raises:
        EmptyBatchError: If no summaries are supplied
    """
    if not summaries:
        raise EmptyBatchError()
    
    num_entries = 0
    severity_frequency = SeverityFrequency()
    for summary in summaries:
        num_entries += summary.num_entries
        severity_frequency = severity_frequency + summary.severity_frequency
    
    # Files without records carry the zero instant and take no part in the bounds
    timed = [summary for summary in summaries if summary.num_entries > 0]
    start_time = timed[0].start_time if timed else ZERO_TIME
    end_time = timed[0].end_time if timed else ZERO_TIME
    for summary in timed[1:]:
        if summary.start_time < start_time:
            start_time = summary.start_time
        if summary.end_time > end_time:
            end_time = summary.end_time
    
    unreadable = [summary.path for summary in summaries if summary.read_error is not None]
    if unreadable:
        logger.warning(f"{len(unreadable)} of {len(summaries)} files could not be read")
    
    return GlobalSummary(
        num_files=len(summaries),
        num_entries=num_entries,
        severity_frequency=severity_frequency,
        top_messages=merge_top_messages(summaries),
        start_time=start_time,
        end_time=end_time,
        unreadable_files=unreadable,
    )
