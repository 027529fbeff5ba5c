"""Module for the in memory record store."""

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

import logging

from gddb.config import StoreConfig
from gddb.exceptions import DuplicateFoundError, ItemNotFoundError

from .store import Store, T, V


_LOGGER = logging.getLogger(__name__)


class InMemoryStore(Store[T]):
    """In-memory implementation of the Store interface.

    Items live in a `set`, which enforces uniqueness on its own. The
    `strict_duplicates` flag only decides whether an attempt to insert a
    duplicate is reported as an error or silently dropped.
    """

    def __init__(
        self,
        label: str,
        save_path: Path | str | None = None,
        strict_duplicates: bool = False,
        items: Iterable[T] = (),
    ) -> None:
        """Initialize the InMemoryStore."""
        self._label = label
        self._save_path = Path(save_path) if save_path is not None else None
        self._strict_duplicates = strict_duplicates
        self._items: set[T] = set(items)

    @classmethod
    def from_config(cls, config: StoreConfig) -> "InMemoryStore[Any]":
        """Create an empty store from a StoreConfig."""
        return cls(
            label=config.label,
            save_path=config.save_path,
            strict_duplicates=config.strict_duplicates,
        )

    @property
    def label(self) -> str:
        """Friendly name of the store."""
        return self._label

    @property
    def save_path(self) -> Path | None:
        """Explicit persistence location, if one was configured."""
        return self._save_path

    @property
    def strict_duplicates(self) -> bool:
        """Whether inserting a duplicate item raises instead of being ignored."""
        return self._strict_duplicates

    def create(self, item: T) -> None:
        """Insert an item into the store."""
        if item in self._items:
            if self._strict_duplicates:
                raise DuplicateFoundError(item)
            _LOGGER.debug(
                "Item %s already exists in store %s, skipping", item, self._label
            )
            return
        _LOGGER.debug("Adding item %s to store %s", item, self._label)
        self._items.add(item)

    def destroy(self, item: T) -> None:
        """Remove the item equal to `item` from the store."""
        try:
            self._items.remove(item)
        except KeyError:
            raise ItemNotFoundError(
                f"Item not found in store {self._label}: {item!r}"
            ) from None
        _LOGGER.debug("Removed item %s from store %s", item, self._label)

    def update(self, old: T, new: T) -> None:
        """Replace `old` with `new`.

        This is a destroy followed by a create and is not atomic: if `new`
        is rejected as a duplicate, `old` stays removed and the store holds
        neither value.
        """
        self.destroy(old)
        try:
            self.create(new)
        except DuplicateFoundError:
            _LOGGER.warning(
                "Update in store %s removed %s but rejected duplicate replacement %s",
                self._label,
                old,
                new,
            )
            raise

    def find(self, projection: Callable[[T], V], target: V) -> T:
        """Return the first item whose projected value equals `target`."""
        for item in self._items:
            if projection(item) == target:
                return item
        raise ItemNotFoundError(f"No item in store {self._label} matches {target!r}")

    def query(self, projection: Callable[[T], V], target: V) -> list[T]:
        """Return every item whose projected value equals `target`."""
        results = [item for item in self._items if projection(item) == target]
        if not results:
            raise ItemNotFoundError(
                f"No items in store {self._label} match {target!r}"
            )
        return results

    def contains(self, item: T) -> bool:
        """Return True if an item equal to `item` is in the store."""
        return item in self._items

    def __len__(self) -> int:
        """Return the number of items in the store."""
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over a snapshot of the items in the store."""
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        """Stores are equal when their configuration and item sets match."""
        if not isinstance(other, InMemoryStore):
            return NotImplemented
        return (
            self._label == other._label
            and self._save_path == other._save_path
            and self._strict_duplicates == other._strict_duplicates
            and self._items == other._items
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"InMemoryStore(label={self._label!r}, save_path={self._save_path!r}, "
            f"strict_duplicates={self._strict_duplicates!r}, items={len(self._items)})"
        )
