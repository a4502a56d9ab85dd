#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from slugfind.app import add_document, find_documents
from slugfind.config import configure_logging
from slugfind.domain import DocumentNotFoundError, InvalidArgumentError, KeyType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from slugfind.domain import FindResult

log = logging.getLogger(__name__)

EXIT_NOT_FOUND = 3


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up documents by key or slug")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    key_types = [key_type.value for key_type in KeyType]

    add = subparsers.add_parser("add", help="Store a document with its slugs")
    add.add_argument("collection", help="Collection name")
    add.add_argument(
        "--slug",
        dest="slugs",
        action="append",
        default=[],
        help="Slug of the document; repeat for aliases, current slug first",
    )
    add.add_argument("--key", type=str, help="Primary key (generated when omitted)")
    add.add_argument(
        "--key-type",
        choices=key_types,
        default=KeyType.OBJECT_ID.value,
        help="Primary key type of the collection (default: %(default)s)",
    )
    add.add_argument("--data", type=str, help="JSON object with extra document fields")

    find = subparsers.add_parser("find", help="Find documents by key(s) or slug(s)")
    find.add_argument("collection", help="Collection name")
    find.add_argument("identifiers", nargs="+", help="Primary keys or slugs")
    find.add_argument(
        "--key-type",
        choices=key_types,
        default=KeyType.OBJECT_ID.value,
        help="Primary key type of the collection (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _parse_data(value: str | None) -> dict[str, object]:
    if value is None:
        return {}
    try:
        loaded: object = json.loads(value)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON for --data: {value}") from exc
    if not isinstance(loaded, dict):
        raise ValueError("--data must be a JSON object")  # noqa: TRY004
    return loaded  # pyright: ignore[reportUnknownVariableType]


def _print_result(result: FindResult) -> None:
    if result is None:
        return
    documents = result if isinstance(result, list) else [result]
    for document in documents:
        print(json.dumps(document.to_dict(), default=str))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        data = _parse_data(parsed_args.data) if parsed_args.command == "add" else {}
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "add":
            document = add_document(
                parsed_args.collection,
                slugs=parsed_args.slugs,
                key=parsed_args.key,
                key_type=KeyType(parsed_args.key_type),
                data=data,
            )
            print(json.dumps(document.to_dict(), default=str))
        elif parsed_args.command == "find":
            result = find_documents(
                parsed_args.collection,
                parsed_args.identifiers,
                key_type=KeyType(parsed_args.key_type),
            )
            _print_result(result)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except InvalidArgumentError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(2)
    except DocumentNotFoundError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(EXIT_NOT_FOUND)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def cli() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    cli()
