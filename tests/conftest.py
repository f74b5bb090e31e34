"""Pytest configuration and shared fixtures."""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from record_search import tools
from record_search.config import StoreConfig, reset_config
from record_search.core import Record, RecordStore


SAMPLE_ROWS = [
    ("S001", "Alice Johnson", 3.85),
    ("S002", "Bob Smith", 3.92),
    ("S003", "Alice Williams", 3.67),
    ("S004", "Charlie Brown", 3.45),
    ("S005", "David Miller", 3.78),
    ("S006", "Alice Davis", 3.91),
    ("S007", "Eve Anderson", 3.56),
    ("S008", "Frank Wilson", 3.73),
    ("S009", "Grace Lee", 3.88),
    ("S010", "Henry Martinez", 3.62),
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from RECORD_SEARCH_* variables and global state."""
    monkeypatch.delenv("RECORD_SEARCH_INITIAL_CAPACITY", raising=False)
    monkeypatch.delenv("RECORD_SEARCH_LOAD_FACTOR", raising=False)
    reset_config()
    tools.clear_store()
    yield
    reset_config()
    tools.clear_store()


@pytest.fixture
def sample_records():
    return [Record(key, label, score) for key, label, score in SAMPLE_ROWS]


@pytest.fixture
def empty_store():
    return RecordStore(StoreConfig())


@pytest.fixture
def populated_store(sample_records):
    store = RecordStore(StoreConfig())
    for record in sample_records:
        store.add(record)
    return store


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their module."""
    for item in items:
        if "test_tools" in item.nodeid or "test_demo" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
