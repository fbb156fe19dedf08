"""Shared fixtures for logstats tests."""

from pathlib import Path
from typing import Callable

import pytest

@pytest.fixture
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing log content to a temporary file."""
    counter = {"n": 0}
    
    def _write(content: str, name: str = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"test-log-{counter['n']}.txt")
        path.write_text(content, encoding="utf-8")
        return path
    
    return _write

@pytest.fixture
def first_log_content() -> str:
    """Log with one INFO and one ERROR line."""
    return (
        "2024-01-01 00:00:00.000 | INFO | app.module: function: 123 - User logged in\n"
        "2024-01-01 00:01:00.000 | ERROR | app.module: function: 124 - Database error"
    )

@pytest.fixture
def second_log_content() -> str:
    """Log with one WARNING and one ERROR line."""
    return (
        "2024-01-01 00:02:00.000 | WARNING | app.module: function: 125 - Low memory\n"
        "2024-01-01 00:03:00.000 | ERROR | app.module: function: 126 - Database error"
    )
