"""Binary snapshots of a store.

A database file holds exactly one MessagePack encoded `StoreSnapshot`: the
store label, its save path, its duplicate policy and the list of items. Each
item is stored as its own MessagePack encoded blob, written in sorted order so
that equal stores always produce identical files. Item order carries no
meaning when loading.

The whole store is rewritten on every dump. The new contents are written to a
temporary file next to the target which then replaces the target, so a failed
dump leaves the previous file intact.
"""

from dataclasses import dataclass
import functools
import logging
import os
from pathlib import Path
import stat
import tempfile
from typing import Any

from mashumaro.codecs.msgpack import MessagePackDecoder, MessagePackEncoder
from mashumaro.mixins.msgpack import DataClassMessagePackMixin

from gddb.exceptions import (
    CorruptDataError,
    DatabaseNotFoundError,
    EncodeError,
    StoreIOError,
)
from gddb.record import Record

from .in_memory import InMemoryStore
from .path import label_from_path, smart_path
from .store import Store

__all__ = [
    "StoreSnapshot",
    "encode",
    "decode",
    "dump",
    "load",
    "auto_load_or_create",
]

_LOGGER = logging.getLogger(__name__)


@dataclass
class StoreSnapshot(DataClassMessagePackMixin):
    """The persisted form of a store."""

    label: str
    """Friendly name of the store."""

    save_path: str | None
    """Explicit persistence location of the store, if any."""

    strict_duplicates: bool
    """Duplicate policy of the store."""

    items: list[bytes]
    """Individually encoded items, sorted by their encoding."""


@functools.cache
def _item_encoder(item_type: type[Any]) -> MessagePackEncoder:
    return MessagePackEncoder(item_type)


def encode(store: Store[Any]) -> bytes:
    """Encode a store into the snapshot file format.

    Each item is encoded according to its own runtime type, so the element
    type must be supported by mashumaro (dataclasses, primitives, ...).

    Raises:
        EncodeError: If an item cannot be encoded.
    """
    try:
        items = sorted(_item_encoder(type(item)).encode(item) for item in store)
        snapshot = StoreSnapshot(
            label=store.label,
            save_path=str(store.save_path) if store.save_path is not None else None,
            strict_duplicates=store.strict_duplicates,
            items=items,
        )
        return snapshot.to_msgpack()
    except Exception as err:
        raise EncodeError(f"Unable to encode store {store.label}: {err}") from err


def decode(content: bytes, item_type: type[Any] = Record) -> InMemoryStore[Any]:
    """Decode the snapshot file format into a store of `item_type` items.

    Raises:
        CorruptDataError: If the content is truncated, malformed or holds items
            that are not of `item_type`.
    """
    try:
        snapshot = StoreSnapshot.from_msgpack(content)
        decoder = MessagePackDecoder(item_type)
        encoder = _item_encoder(item_type)
        items: list[Any] = []
        for raw in snapshot.items:
            item = decoder.decode(raw)
            # The decoder converts field values instead of checking their types
            if encoder.encode(item) != raw:
                raise ValueError(f"item does not match its encoding: {item!r}")
            items.append(item)
    except Exception as err:
        raise CorruptDataError(
            f"Unable to decode database of {item_type.__name__} items: {err}"
        ) from err
    if (
        not isinstance(snapshot.label, str)
        or not isinstance(snapshot.save_path, str | None)
        or not isinstance(snapshot.strict_duplicates, bool)
    ):
        raise CorruptDataError(f"Invalid database header: {snapshot!r}")
    return InMemoryStore(
        label=snapshot.label,
        save_path=snapshot.save_path,
        strict_duplicates=snapshot.strict_duplicates,
        items=items,
    )


def _file_mode(path: Path) -> int:
    """Return the permissions a newly written database file should have.

    An existing file keeps its mode, otherwise the mode follows the umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def dump(store: Store[Any]) -> Path:
    """Write the entire store to its database file and return the path.

    Raises:
        EncodeError: If the store cannot be encoded. Nothing is written.
        StoreIOError: If the file cannot be written.
    """
    path = smart_path(store)
    content = encode(store)
    _LOGGER.debug(
        "Writing %d items of store %s to %s (%d bytes)",
        len(store),
        store.label,
        path,
        len(content),
    )
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(content)
        os.chmod(tmp_path, _file_mode(path))
        os.replace(tmp_path, path)
    except OSError as err:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise StoreIOError(path, err) from err
    return path


def load(path: Path | str, item_type: type[Any] = Record) -> InMemoryStore[Any]:
    """Read a store of `item_type` items from a database file.

    Raises:
        DatabaseNotFoundError: If the path does not exist.
        StoreIOError: If the file cannot be read.
        CorruptDataError: If the file contents cannot be decoded.
    """
    path = Path(path)
    if not path.exists():
        raise DatabaseNotFoundError(path)
    try:
        content = path.read_bytes()
    except OSError as err:
        raise StoreIOError(path, err) from err
    store = decode(content, item_type)
    _LOGGER.debug("Loaded %d items of store %s from %s", len(store), store.label, path)
    return store


def auto_load_or_create(
    path: Path | str,
    strict_duplicates: bool = False,
    item_type: type[Any] = Record,
) -> InMemoryStore[Any]:
    """Load the database at `path`, or create an empty store saving to `path`.

    An existing file keeps its persisted duplicate policy; `strict_duplicates`
    only applies to a newly created store, whose label is derived from the
    file name (see `label_from_path`).

    Raises:
        BadNameError: If a new store is needed and no label can be derived.
    """
    path = Path(path)
    if path.exists():
        _LOGGER.info("Loading existing database %s", path)
        return load(path, item_type)
    label = label_from_path(path)
    _LOGGER.info("Creating new database %s at %s", label, path)
    return InMemoryStore(label, save_path=path, strict_duplicates=strict_duplicates)
