"""Store interface for holding a set of records."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterator
from pathlib import Path
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)
V = TypeVar("V")


class Store(ABC, Generic[T]):
    """Abstract base class for a set of unique items with lookup by projection.

    Items are compared by full structural equality: a store never holds two
    items that compare equal. Callers receive the stored values themselves, so
    element types are expected to be immutable (e.g. frozen dataclasses).

    A store is not safe for concurrent mutation. Callers sharing a store
    between threads must serialize access themselves.
    """

    @property
    @abstractmethod
    def label(self) -> str:
        """Friendly name of the store."""

    @property
    @abstractmethod
    def save_path(self) -> Path | None:
        """Explicit persistence location, if one was configured."""

    @property
    @abstractmethod
    def strict_duplicates(self) -> bool:
        """Whether inserting a duplicate item raises instead of being ignored."""

    @abstractmethod
    def create(self, item: T) -> None:
        """Insert an item into the store.

        Raises:
            DuplicateFoundError: If the store is strict and an equal item exists.
        """

    @abstractmethod
    def destroy(self, item: T) -> None:
        """Remove the item equal to `item` from the store.

        Raises:
            ItemNotFoundError: If no equal item exists.
        """

    @abstractmethod
    def update(self, old: T, new: T) -> None:
        """Replace `old` with `new`.

        Raises:
            ItemNotFoundError: If `old` is not present. Nothing is inserted.
            DuplicateFoundError: If the store is strict and `new` collides with
                another item. `old` has already been removed in this case.
        """

    @abstractmethod
    def find(self, projection: Callable[[T], V], target: V) -> T:
        """Return the first item whose projected value equals `target`.

        Items are scanned in an unspecified order, so when several items match
        which one is returned is not stable.

        Raises:
            ItemNotFoundError: If no item matches.
        """

    @abstractmethod
    def query(self, projection: Callable[[T], V], target: V) -> list[T]:
        """Return every item whose projected value equals `target`.

        Raises:
            ItemNotFoundError: If no item matches. An empty result is never
                returned.
        """

    @abstractmethod
    def contains(self, item: T) -> bool:
        """Return True if an item equal to `item` is in the store."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of items in the store."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate over a snapshot of the items in the store."""

    def __contains__(self, item: Any) -> bool:
        """Return True if an item equal to `item` is in the store."""
        return self.contains(item)
