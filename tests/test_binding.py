"""Tests for the engine binding adapter."""

from pathlib import Path

import pytest

from gddb.binding import RecordBinding
from gddb.exceptions import CorruptDataError, ItemNotFoundError
from gddb.record import Record
from gddb.store import InMemoryStore, load


@pytest.fixture
def binding() -> RecordBinding:
    """Create a binding over a fresh store."""
    return RecordBinding()


def test_default_store(binding: RecordBinding) -> None:
    """Test the default store configuration."""
    assert binding.store.label == "GAME"
    assert binding.store.save_path is None
    assert not binding.store.strict_duplicates


def test_create_and_find(binding: RecordBinding) -> None:
    """Test records round trip through their dictionary form."""
    uuid = binding.create("Player", {"name": "ada", "hp": 10})
    assert binding.find(uuid) == {
        "uuid": uuid,
        "model": "Player",
        "attributes": {"name": "ada", "hp": 10},
    }
    record = binding.store.find(lambda r: r.uuid, uuid)
    assert record.attributes == '{"hp": 10, "name": "ada"}'


def test_find_missing(binding: RecordBinding) -> None:
    """Test looking up an unknown uuid."""
    with pytest.raises(ItemNotFoundError):
        binding.find("missing")


def test_update(binding: RecordBinding) -> None:
    """Test replacing the model and attributes of a record."""
    uuid = binding.create("Player", {"hp": 10})
    binding.update(uuid, "Enemy", {"hp": 3})
    assert binding.find(uuid) == {
        "uuid": uuid,
        "model": "Enemy",
        "attributes": {"hp": 3},
    }
    assert len(binding.store) == 1


def test_update_missing(binding: RecordBinding) -> None:
    """Test updating an unknown uuid."""
    with pytest.raises(ItemNotFoundError):
        binding.update("missing", "Enemy", {})


def test_destroy(binding: RecordBinding) -> None:
    """Test removing a record by uuid."""
    uuid = binding.create("Player", {})
    other = binding.create("Player", {})
    binding.destroy(uuid)
    with pytest.raises(ItemNotFoundError):
        binding.find(uuid)
    assert binding.find(other)["uuid"] == other


def test_invalid_attributes() -> None:
    """Test records not written by the binding may hold non-JSON attributes."""
    store: InMemoryStore[Record] = InMemoryStore("GAME")
    record = Record.new("Player", "not json")
    store.create(record)
    with pytest.raises(CorruptDataError, match="not valid JSON"):
        RecordBinding(store).find(record.uuid)


def test_dump(tmp_path: Path) -> None:
    """Test persisting the store behind the binding."""
    path = tmp_path / "game.gddb"
    binding = RecordBinding(InMemoryStore("GAME", save_path=path))
    uuid = binding.create("Player", {"hp": 10})
    assert binding.dump() == path
    assert RecordBinding(load(path)).find(uuid)["attributes"] == {"hp": 10}
