"""Command line tool for operating on a gddb database file."""

import argparse
import logging
import sys
import traceback

from gddb.exceptions import GddbException
from . import query, record

_LOGGER = logging.getLogger(__name__)


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command line utility for inspecting and editing a gddb database.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=True)

    record.CreateAction.register(subparsers)
    record.GetAction.register(subparsers)
    record.UpdateAction.register(subparsers)
    record.DestroyAction.register(subparsers)
    query.QueryAction.register(subparsers)
    query.InfoAction.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """gddb command line tool main entry point."""
    parser = _make_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logging.basicConfig(level=args.log_level)

    action = args.cls()
    try:
        action.run(**vars(args))
    except GddbException as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print(f"gddb error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
