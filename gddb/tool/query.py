"""Commands for listing records and describing a database."""

import logging
from argparse import ArgumentParser, _SubParsersAction as SubParsersAction
import pathlib
from typing import Any, cast

from gddb.exceptions import ItemNotFoundError
from gddb.record import Record
from gddb.store import smart_path

from .common import RECORD_COLUMNS, add_store_flags, open_store
from .format import PrintFormatter, formatter

_LOGGER = logging.getLogger(__name__)


class QueryAction:
    """List records, optionally filtered by model."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "query",
                aliases=["ls"],
                help="List records",
                description="Print records, optionally only those of a model",
            ),
        )
        args.add_argument("--model", "-m", help="Only list records of this model")
        args.add_argument(
            "--output",
            "-o",
            choices=["table", "yaml", "json"],
            default="table",
            help="Output format of the command",
        )
        add_store_flags(args)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        model: str | None,
        output: str,
        db: pathlib.Path,
        strict: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        store = open_store(db, strict)
        records: list[Record]
        if model is None:
            records = list(store)
        else:
            try:
                records = store.query(lambda r: r.model, model)
            except ItemNotFoundError:
                records = []
        if not records:
            print(_not_found(model))
            return
        records.sort(key=lambda r: (r.model, r.uuid))
        formatter(output, RECORD_COLUMNS).print([r.to_dict() for r in records])


def _not_found(model: str | None) -> str:
    if model is None:
        return "No records found"
    return f"No records found with model '{model}'"


class InfoAction:
    """Describe a database."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "info",
                help="Describe the database",
                description="Print the label, path, duplicate policy and size",
            ),
        )
        add_store_flags(args)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        db: pathlib.Path,
        strict: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        store = open_store(db, strict)
        info: dict[str, Any] = {
            "label": store.label,
            "path": str(smart_path(store)),
            "strict": store.strict_duplicates,
            "records": len(store),
        }
        PrintFormatter().print([info])
