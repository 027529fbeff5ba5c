"""Commands for creating, reading, updating and destroying records."""

import logging
from argparse import ArgumentParser, _SubParsersAction as SubParsersAction
import pathlib
from typing import cast

from gddb.binding import RecordBinding
from gddb.store import dump

from .common import add_store_flags, open_store, parse_attributes
from .format import formatter

_LOGGER = logging.getLogger(__name__)


class CreateAction:
    """Create a record."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "create",
                help="Create a record",
                description="Add a new record to the database and print its uuid",
            ),
        )
        args.add_argument("model", help="Model name of the record")
        args.add_argument(
            "--attributes",
            "-a",
            help="Attributes of the record as a JSON object",
            default=None,
        )
        add_store_flags(args)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        model: str,
        attributes: str | None,
        db: pathlib.Path,
        strict: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        binding = RecordBinding(open_store(db, strict))
        uuid = binding.create(model, parse_attributes(attributes))
        binding.dump()
        print(uuid)


class GetAction:
    """Get a single record."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "get",
                help="Get a record by uuid",
                description="Print a record with its attributes decoded",
            ),
        )
        args.add_argument("uuid", help="Uuid of the record")
        args.add_argument(
            "--output",
            "-o",
            choices=["yaml", "json"],
            default="yaml",
            help="Output format of the command",
        )
        add_store_flags(args)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        uuid: str,
        output: str,
        db: pathlib.Path,
        strict: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        binding = RecordBinding(open_store(db, strict))
        formatter(output).print([binding.find(uuid)])


class UpdateAction:
    """Update a record."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "update",
                help="Update a record by uuid",
                description=(
                    "Replace the model and/or attributes of a record. Values "
                    "that are not specified are kept."
                ),
            ),
        )
        args.add_argument("uuid", help="Uuid of the record")
        args.add_argument("--model", "-m", help="New model name", default=None)
        args.add_argument(
            "--attributes",
            "-a",
            help="New attributes of the record as a JSON object",
            default=None,
        )
        add_store_flags(args)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        uuid: str,
        model: str | None,
        attributes: str | None,
        db: pathlib.Path,
        strict: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        binding = RecordBinding(open_store(db, strict))
        current = binding.find(uuid)
        binding.update(
            uuid,
            model if model is not None else current["model"],
            (
                parse_attributes(attributes)
                if attributes is not None
                else current["attributes"]
            ),
        )
        binding.dump()


class DestroyAction:
    """Destroy a record."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "destroy",
                aliases=["rm"],
                help="Destroy a record by uuid",
                description="Remove a record from the database",
            ),
        )
        args.add_argument("uuid", help="Uuid of the record")
        add_store_flags(args)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        uuid: str,
        db: pathlib.Path,
        strict: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        store = open_store(db, strict)
        RecordBinding(store).destroy(uuid)
        path = dump(store)
        _LOGGER.debug("Destroyed record %s in %s", uuid, path)
