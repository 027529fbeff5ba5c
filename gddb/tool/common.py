"""Flags and helpers shared by the gddb commands."""

from argparse import ArgumentParser, BooleanOptionalAction
import json
import logging
import pathlib
from typing import Any

from gddb.config import DEFAULT_LABEL, FILE_EXTENSION
from gddb.exceptions import InputException
from gddb.record import Record
from gddb.store import InMemoryStore, auto_load_or_create

_LOGGER = logging.getLogger(__name__)

DEFAULT_DB_PATH = pathlib.Path(f"{DEFAULT_LABEL}.{FILE_EXTENSION}")
RECORD_COLUMNS = ["uuid", "model", "attributes"]


def add_store_flags(args: ArgumentParser) -> None:
    """Add flags for selecting the database file."""
    args.add_argument(
        "--db",
        help=f"Path of the database file (default: {DEFAULT_DB_PATH})",
        type=pathlib.Path,
        default=DEFAULT_DB_PATH,
    )
    args.add_argument(
        "--strict",
        action=BooleanOptionalAction,
        default=False,
        help="Reject duplicate records when a new database file is created",
    )


def open_store(db: pathlib.Path, strict: bool) -> InMemoryStore[Record]:
    """Open the database file, or start a new one at that path."""
    _LOGGER.debug("Opening database %s", db)
    return auto_load_or_create(db, strict_duplicates=strict)


def parse_attributes(value: str | None) -> dict[str, Any]:
    """Parse an `--attributes` flag holding a JSON object."""
    if not value:
        return {}
    try:
        attributes = json.loads(value)
    except ValueError as err:
        raise InputException(f"Attributes are not valid JSON: {err}") from err
    if not isinstance(attributes, dict):
        raise InputException(f"Attributes must be a JSON object: {value}")
    return attributes
