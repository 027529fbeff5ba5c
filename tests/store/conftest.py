"""Test fixtures for the store."""

import pytest

from gddb.record import Record
from gddb.store import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore[Record]:
    """Create a non-strict in-memory store for testing."""
    return InMemoryStore("Test store")


@pytest.fixture
def strict_store() -> InMemoryStore[Record]:
    """Create a strict in-memory store for testing."""
    return InMemoryStore("Strict store", strict_duplicates=True)
