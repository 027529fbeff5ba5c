"""Configuration objects for gddb."""

from dataclasses import dataclass
from pathlib import Path

FILE_EXTENSION = "gddb"
"""Extension of database files named after their label."""

DEFAULT_LABEL = "GAME"
"""Label of the store created by the engine binding."""


@dataclass
class StoreConfig:
    """Configuration for constructing a store."""

    label: str = DEFAULT_LABEL
    """Friendly name, also the fallback file stem when dumping."""

    save_path: Path | None = None
    """Explicit location of the database file."""

    strict_duplicates: bool = False
    """Raise on inserting an item that is already present instead of ignoring it."""
