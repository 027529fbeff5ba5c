"""Exceptions related to gddb."""

from pathlib import Path
from typing import Any

__all__ = [
    "GddbException",
    "DuplicateFoundError",
    "ItemNotFoundError",
    "DatabaseNotFoundError",
    "BadNameError",
    "CodecError",
    "CorruptDataError",
    "EncodeError",
    "StoreIOError",
    "InputException",
]


class GddbException(Exception):
    """Generic base exception used for this library."""


class DuplicateFoundError(GddbException):
    """Raised when a strict store is asked to insert an item it already holds."""

    def __init__(self, item: Any) -> None:
        super().__init__(f"Item already exists in store: {item!r}")
        self.item = item


class ItemNotFoundError(GddbException):
    """Raised when an item is not found in the store."""


class DatabaseNotFoundError(GddbException):
    """Raised when loading a store from a path that does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Database file not found: {path}")
        self.path = path


class BadNameError(GddbException):
    """Raised when a store label cannot be derived from a path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot derive a database label from path: {str(path)!r}")
        self.path = path


class CodecError(GddbException):
    """Raised when a store cannot be converted to or from its binary form."""


class CorruptDataError(CodecError):
    """Raised when the contents of a database file cannot be decoded."""


class EncodeError(CodecError):
    """Raised when the contents of a store cannot be encoded."""


class StoreIOError(GddbException):
    """Raised when reading or writing a database file fails."""

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"I/O error on database file {path}: {error}")
        self.path = path
        self.error = error


class InputException(GddbException):
    """Raised when input values are not formatted as expected."""
