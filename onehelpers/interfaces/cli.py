from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from ..config import get_settings
from ..logging import configure_logging
from ..utils import keys, read_text, split, values


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Small text, file and mapping helpers."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug messages on the console.",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    keys_parser = subparsers.add_parser("keys", help="Print the keys of a JSON object, one per line")
    keys_parser.add_argument("json_file", help="Path to a file holding a JSON object")
    keys_parser.add_argument("--encoding", help="Text encoding of the file (default: ONEHELPERS_ENCODING or utf-8).")

    values_parser = subparsers.add_parser("values", help="Print the values of a JSON object, one per line")
    values_parser.add_argument("json_file", help="Path to a file holding a JSON object")
    values_parser.add_argument("--encoding", help="Text encoding of the file (default: ONEHELPERS_ENCODING or utf-8).")

    split_parser = subparsers.add_parser("split", help="Split text on a delimiter, one piece per line")
    split_parser.add_argument("text", help="Text to split")
    split_parser.add_argument("delim", help="Delimiter string (must not be empty)")

    read_parser = subparsers.add_parser("read", help="Print the contents of a text file unchanged")
    read_parser.add_argument("path", help="Path of the file to read")
    read_parser.add_argument("--encoding", help="Text encoding of the file (default: ONEHELPERS_ENCODING or utf-8).")

    return parser.parse_args(args=argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logger = logging.getLogger("onehelpers")
    try:
        settings = get_settings()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(base_dir=settings.log_dir, verbose=args.verbose)
    logger.debug("Running command: %s", args.command)

    try:
        if args.command in ("keys", "values"):
            return _handle_mapping_command(args)
        if args.command == "split":
            for piece in split(args.text, args.delim):
                print(piece)
            return 0
        if args.command == "read":
            encoding = args.encoding or settings.encoding
            _write_raw(read_text(args.path, encoding=encoding), encoding)
            return 0
    except (OSError, ValueError, LookupError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1

    raise ValueError(f"Unknown command: {args.command}")


def _write_raw(content: str, encoding: str) -> None:
    # bytes go straight to the binary layer so line endings are not translated
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(content)
        return
    sys.stdout.flush()
    stream.write(content.encode(encoding))
    stream.flush()


def _handle_mapping_command(args: argparse.Namespace) -> int:
    document = json.loads(read_text(args.json_file, encoding=args.encoding))
    if not isinstance(document, dict):
        raise ValueError(f"{args.json_file} does not hold a JSON object")

    if args.command == "keys":
        for key in keys(document):
            print(key)
    else:
        for value in values(document):
            print(json.dumps(value, ensure_ascii=False))
    return 0


__all__ = ["main", "parse_args"]
