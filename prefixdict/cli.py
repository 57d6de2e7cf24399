from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from msgspec import DecodeError

from prefixdict.config import config, get_log_level
from prefixdict.core.dictionary import RadixDictionary
from prefixdict.errors import PrefixDictError
from prefixdict.logger import with_logging
from prefixdict.utils.format import plural
from prefixdict.utils.helper import dump_value, load_mapping
from prefixdict.utils.wrappers import time_it

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prefixdict", description="Query a JSON or MessagePack mapping by key or key prefix")
    parser.add_argument("source", type=Path, help="A .json or .msgpack file holding an object with string keys")

    query = parser.add_mutually_exclusive_group()
    query.add_argument("--get", "-g", metavar="KEY", help="Print the value stored under KEY", dest="get")
    query.add_argument(
        "--prefix",
        "-p",
        metavar="PREFIX",
        default="",
        help="Print the values of every key starting with PREFIX (default: every value)",
        dest="prefix",
    )
    query.add_argument("--count", "-c", action="store_true", help="Print the number of keys", dest="count")

    parser.add_argument(
        "--keys",
        "-k",
        action="store_true",
        help="Print matching keys instead of values",
        dest="keys",
    )

    case = parser.add_mutually_exclusive_group()
    case.add_argument(
        "--ignore-case",
        "-i",
        action="store_false",
        help="Match keys case-insensitively",
        dest="case_sensitive",
    )
    case.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Match keys exactly",
        dest="case_sensitive",
    )
    parser.set_defaults(case_sensitive=config.case_sensitive)

    parser.add_argument(
        "--log-file",
        action=argparse.BooleanOptionalAction,
        default=config.log_file,
        help="Also write logs to the user log directory",
        dest="log_file",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug logging",
        dest="debug",
    )
    return parser


def load_dictionary(source: Path, *, case_sensitive: bool) -> RadixDictionary[Any]:
    with time_it(f"Loading {source}"):
        mapping = load_mapping(source)
        dictionary: RadixDictionary[Any] = RadixDictionary(mapping, case_sensitive=case_sensitive)
    log.debug("Loaded %s from %s", plural(len(dictionary), "key"), source)
    return dictionary


def run(args: argparse.Namespace) -> int:
    try:
        dictionary = load_dictionary(args.source, case_sensitive=args.case_sensitive)
    except (OSError, ValueError, DecodeError) as exc:
        log.error("Could not load %s: %s", args.source, exc)  # noqa: TRY400
        return 1

    try:
        if args.count:
            print(len(dictionary))
        elif args.get is not None:
            found, value = dictionary.try_get_value(args.get)
            if not found:
                log.error("No item with the key %r has been found.", args.get)
                return 1
            print(dump_value(value))
        elif args.keys:
            for key in dictionary.keys_with_prefix(args.prefix):
                print(key)
        else:
            for value in dictionary.find_by_prefix(args.prefix):
                print(dump_value(value))
    except PrefixDictError as exc:
        log.error("%s", exc)  # noqa: TRY400
        return 1

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Load a mapping file and run a single query against it."""
    args = build_parser().parse_args(argv)

    with with_logging(get_log_level(debug=args.debug), log_file=args.log_file):
        return run(args)


if __name__ == "__main__":
    sys.exit(main())
