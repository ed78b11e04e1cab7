"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import List

import pytest

from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.adapters.metrics_collector import InMemoryMetricsCollector
from number_pipeline.filters.builtin import create_default_registry
from number_pipeline.registry.filter_registry import FilterRegistry


class RecordingObserver:
    """Observer that appends every call to a shared event log."""

    def __init__(self, label: str, events: List[tuple]) -> None:
        self.label = label
        self.events = events

    def on_number(self, number: int) -> None:
        self.events.append((self.label, "number", number))

    def on_finished(self) -> None:
        self.events.append((self.label, "finished"))


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding static test files."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def numbers_file(tmp_path: Path) -> Path:
    """File with the numbers 1 through 6."""
    path = tmp_path / "numbers.txt"
    path.write_text("1 2 3 4 5 6\n")
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """Existing file with no content."""
    path = tmp_path / "empty.txt"
    path.write_text("")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    """Path that does not exist."""
    return tmp_path / "does_not_exist.txt"


@pytest.fixture
def registry() -> FilterRegistry:
    """Registry with the built-in filters."""
    return create_default_registry()


@pytest.fixture
def source() -> FileNumberSource:
    """File number source with default encoding."""
    return FileNumberSource()


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream for observer output."""
    return io.StringIO()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def events() -> List[tuple]:
    """Shared event log for RecordingObserver instances."""
    return []


@pytest.fixture
def make_recorder(events: List[tuple]):
    """Factory for RecordingObserver instances sharing the events log."""

    def _make(label: str) -> RecordingObserver:
        return RecordingObserver(label, events)

    return _make
