"""
The store module provides a generic in-memory set of records with whole-file
binary persistence.

- Items are unique by full structural equality (hash + eq).
- Provides create, update and destroy mutations and find/query scans over a
  caller supplied projection.
- Provides dump and load of the entire store to and from a single file.

The store assumes a single writer and performs no locking.
"""

from .store import Store
from .in_memory import InMemoryStore
from .path import label_from_path, smart_path
from .snapshot import StoreSnapshot, auto_load_or_create, dump, load

__all__ = [
    "Store",
    "InMemoryStore",
    "StoreSnapshot",
    "auto_load_or_create",
    "dump",
    "label_from_path",
    "load",
    "smart_path",
]
