"""
gddb is a small embeddable in-memory record store with whole-file binary
snapshots.

A store holds a set of values of a single hashable element type (the bundled
`gddb.record.Record` or any frozen dataclass), rejects structural duplicates,
supports linear find/query scans over a caller supplied projection and can be
dumped to and loaded from a single file.

The store is single writer and offers no durability guarantees beyond
replacing the snapshot file as a whole on every dump.
"""

__all__ = [
    "binding",
    "config",
    "exceptions",
    "record",
    "store",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
