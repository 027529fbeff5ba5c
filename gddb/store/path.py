"""Resolution of database file paths and labels."""

from pathlib import Path
from typing import Any

from gddb.config import FILE_EXTENSION
from gddb.exceptions import BadNameError

from .store import Store

__all__ = [
    "smart_path",
    "label_from_path",
]


def smart_path(store: Store[Any]) -> Path:
    """Return the path a store is persisted to.

    This is the configured `save_path` when present, otherwise a file named
    after the label in the current working directory.
    """
    if store.save_path is not None:
        return store.save_path
    return Path(f"{store.label}.{FILE_EXTENSION}")


def label_from_path(path: Path) -> str:
    """Derive a store label from a database file path.

    The label is the segment between the last two dots of the file name, so
    `game.gddb` yields `game` while `save.game.gddb` yields `game` as well (not
    `save.game`). A name without any dot is used as is.

    Raises:
        BadNameError: If the path has no usable file name.
    """
    parts = path.name.split(".")
    label = parts[-2] if len(parts) > 1 else parts[0]
    if not label:
        raise BadNameError(path)
    try:
        label.encode("utf-8")
    except UnicodeEncodeError as err:
        # Undecodable bytes in the file name survive as lone surrogates
        raise BadNameError(path) from err
    return label
