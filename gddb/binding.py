"""Adapter exposing a record store to a game engine host.

The host only deals in record ids, model names and attribute dictionaries.
This module converts attribute dictionaries to and from the JSON text kept in
`Record.attributes`; the store itself never looks inside the attributes.
"""

from collections.abc import Mapping
import json
import logging
from pathlib import Path
from typing import Any

from .config import DEFAULT_LABEL
from .exceptions import CorruptDataError
from .record import Record
from .store import InMemoryStore, dump

__all__ = [
    "RecordBinding",
]

_LOGGER = logging.getLogger(__name__)


def _encode_attributes(attributes: Mapping[str, Any]) -> str:
    return json.dumps(dict(attributes), sort_keys=True)


def _decode_attributes(record: Record) -> dict[str, Any]:
    if not record.attributes:
        return {}
    try:
        value = json.loads(record.attributes)
    except ValueError as err:
        raise CorruptDataError(
            f"Record {record.uuid} attributes are not valid JSON: {err}"
        ) from err
    if not isinstance(value, dict):
        raise CorruptDataError(f"Record {record.uuid} attributes are not an object")
    return value


class RecordBinding:
    """The record operations offered to the host engine.

    Records are addressed by uuid. Lookups are a linear scan of the store.
    """

    def __init__(self, store: InMemoryStore[Record] | None = None) -> None:
        """Initialize RecordBinding with an empty non-strict store by default."""
        self._store: InMemoryStore[Record] = (
            store if store is not None else InMemoryStore(DEFAULT_LABEL)
        )

    @property
    def store(self) -> InMemoryStore[Record]:
        """The underlying store."""
        return self._store

    def create(self, model: str, attributes: Mapping[str, Any]) -> str:
        """Create a new record and return its uuid."""
        record = Record.new(model, _encode_attributes(attributes))
        self._store.create(record)
        return record.uuid

    def find(self, uuid: str) -> dict[str, Any]:
        """Return the record with the given uuid as a dictionary."""
        record = self._store.find(lambda r: r.uuid, uuid)
        return {
            "uuid": record.uuid,
            "model": record.model,
            "attributes": _decode_attributes(record),
        }

    def update(self, uuid: str, model: str, attributes: Mapping[str, Any]) -> None:
        """Replace the model and attributes of the record with the given uuid."""
        original = self._store.find(lambda r: r.uuid, uuid)
        new = Record(uuid=uuid, model=model, attributes=_encode_attributes(attributes))
        _LOGGER.debug("Updating record %s", uuid)
        self._store.update(original, new)

    def destroy(self, uuid: str) -> None:
        """Remove the record with the given uuid."""
        record = self._store.find(lambda r: r.uuid, uuid)
        self._store.destroy(record)

    def dump(self) -> Path:
        """Persist the underlying store."""
        return dump(self._store)
