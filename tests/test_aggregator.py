"""Tests for per-file aggregation."""

from datetime import datetime

import pytest

from logstats.core.aggregator import (
    aggregate_file,
    count_severities,
    parse_timestamp,
    read_records,
    summarize_records,
    top_messages,
)
from logstats.core.constants import ZERO_TIME
from logstats.core.errors import TimestampFormatError
from logstats.models.data import LogRecord, MessageFrequency, SeverityFrequency

def make_record(message: str = "msg", severity: str = "INFO", timestamp: str = "2024-01-01 00:00:00.000") -> LogRecord:
    return LogRecord(
        timestamp=timestamp,
        severity=severity,
        module="app.module",
        function="function",
        line_number=1,
        message=message,
    )

def test_count_severities():
    """Test that only the four recognised severities are tallied."""
    records = [make_record(severity=s) for s in
               ["DEBUG", "INFO", "INFO", "WARNING", "ERROR", "ERROR", "INVALID", "error"]]
    assert count_severities(records) == SeverityFrequency(debug=1, info=2, warning=1, error=2)

def test_count_severities_is_order_independent():
    """Test that reordering records does not change the counts."""
    records = [make_record(severity=s) for s in ["ERROR", "DEBUG", "ERROR", "INFO"]]
    assert count_severities(records) == count_severities(list(reversed(records)))

def test_top_messages_ranking():
    """Test ranking with ties broken by first appearance."""
    messages = ["Error 3", "Error 1", "Error 3", "Error 2", "Error 3",
                "Error 4", "Error 1", "Error 5", "Error 6"]
    ranked = top_messages([make_record(message=m) for m in messages])
    assert [(slot.message, slot.frequency) for slot in ranked] == [
        ("Error 3", 3),
        ("Error 1", 2),
        ("Error 2", 1),
        ("Error 4", 1),
        ("Error 5", 1),
    ]

def test_top_messages_pads_to_five_slots():
    """Test that fewer than five distinct messages are padded."""
    ranked = top_messages([make_record(message="a"), make_record(message="b"), make_record(message="a")])
    assert len(ranked) == 5
    assert ranked[:2] == [MessageFrequency(message="a", frequency=2), MessageFrequency(message="b", frequency=1)]
    assert all(slot.is_placeholder and slot.message == "" for slot in ranked[2:])

def test_parse_timestamp():
    """Test the fixed timestamp layout, with and without fraction."""
    assert parse_timestamp("2024-01-02 15:04:05.999") == datetime(2024, 1, 2, 15, 4, 5, 999000)
    assert parse_timestamp("2024-01-02 15:04:05") == datetime(2024, 1, 2, 15, 4, 5)
    with pytest.raises(TimestampFormatError):
        parse_timestamp("02/01/2024 15:04")

def test_start_and_end_follow_file_order():
    """Test that bounds come from the first and last records, unsorted."""
    records = [
        make_record(timestamp="2024-01-01 12:00:00.000"),
        make_record(timestamp="2024-01-01 00:00:00.000"),
        make_record(timestamp="2024-01-02 00:00:00.000"),
        make_record(timestamp="2024-01-01 06:00:00.000"),
    ]
    summary = summarize_records("app.log", records)
    assert summary.start_time == datetime(2024, 1, 1, 12)
    assert summary.end_time == datetime(2024, 1, 1, 6)

def test_summarize_malformed_boundary_timestamp_is_fatal():
    """Test that a present but malformed timestamp aborts the summary."""
    with pytest.raises(TimestampFormatError):
        summarize_records("app.log", [make_record(timestamp="not a time")])

def test_aggregate_file(write_log):
    """Test a full file analysis."""
    path = write_log(
        "2024-01-01 00:00:00.000 | INFO | app.module: function: 123 - User logged in\n"
        "2024-01-01 00:01:00.000 | ERROR | app.module: function: 124 - Database connection failed\n"
        "garbage line\n"
        "2024-01-01 00:02:00.000 | ERROR | app.module: function: 125 - Database connection failed\n"
    )
    summary = aggregate_file(path)
    
    assert summary.path == str(path)
    assert summary.num_entries == 3
    assert summary.severity_frequency == SeverityFrequency(info=1, error=2)
    assert summary.top_messages[0] == MessageFrequency(message="Database connection failed", frequency=2)
    assert summary.start_time == datetime(2024, 1, 1, 0, 0)
    assert summary.end_time == datetime(2024, 1, 1, 0, 2)
    assert summary.read_error is None

@pytest.mark.parametrize("content", ["", "\n", "not a log line\nneither | is | this\n"])
def test_aggregate_empty_or_malformed_file(write_log, content):
    """Test that files without parseable lines give a zero summary."""
    summary = aggregate_file(write_log(content))
    assert summary.num_entries == 0
    assert summary.severity_frequency == SeverityFrequency()
    assert summary.top_messages == [MessageFrequency()] * 5
    assert summary.start_time == ZERO_TIME
    assert summary.end_time == ZERO_TIME

def test_aggregate_missing_file(tmp_path):
    """Test that an unreadable file becomes an empty summary with a read error."""
    path = tmp_path / "missing.log"
    summary = aggregate_file(path)
    assert summary.num_entries == 0
    assert summary.read_error

def test_read_records_preserves_order(write_log):
    """Test that records come back in file order."""
    path = write_log(
        "2024-01-01 00:00:00.000 | INFO | m: f: 1 - first\r\n"
        "2024-01-01 00:00:01.000 | INFO | m: f: 2 - second\r\n"
    )
    assert [record.message for record in read_records(path)] == ["first", "second"]

def test_bare_carriage_return_stays_in_message(tmp_path):
    """Test that only newlines separate records."""
    path = tmp_path / "cr.log"
    path.write_bytes(
        b"2024-01-01 00:00:00.000 | INFO | m: f: 1 - part one\rpart two\n"
        b"2024-01-01 00:00:01.000 | INFO | m: f: 2 - crlf line\r\n"
    )
    records = read_records(path)
    assert [record.message for record in records] == ["part one\rpart two", "crlf line"]

def test_invalid_bytes_only_affect_their_line(tmp_path):
    """Test that an undecodable byte does not make the file unreadable."""
    path = tmp_path / "latin.log"
    path.write_bytes(
        b"2024-01-01 00:00:00.000 | INFO | m: f: 1 - first\n"
        b"2024-01-01 00:00:01.000 | ERROR | m: f: 2 - caf\xe9 closed\n"
        b"2024-01-01 00:00:02.000 | INFO | m: f: 3 - third\n"
    )
    summary = aggregate_file(path)
    assert summary.read_error is None
    assert summary.num_entries == 3
    assert summary.severity_frequency == SeverityFrequency(info=2, error=1)
    assert "caf\ufffd closed" in [slot.message for slot in summary.ranked_messages()]

@pytest.mark.parametrize("value", [
    "2024-1-2 3:4:5",
    "2024-01-02 3:04:05.000",
    "2024-01-02T15:04:05.000",
    "2024-01-02 15:04:05.",
    " 2024-01-02 15:04:05.000",
])
def test_parse_timestamp_requires_fixed_layout(value):
    """Test that unpadded or differently shaped timestamps are rejected."""
    with pytest.raises(TimestampFormatError):
        parse_timestamp(value)
