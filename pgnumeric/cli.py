"""Command line tool for inspecting NUMERIC encodings.

Usage:
    python -m pgnumeric encode -123.456
    python -m pgnumeric decode '{"sign": "positive", "weight": -1, "scale": 2, "digits": [100]}'
    python -m pgnumeric pack 10001
    python -m pgnumeric unpack 0002000100000000 00010001
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation

import structlog
from pydantic import ValidationError

from pgnumeric.binary import pack, unpack
from pgnumeric.codec import decode, encode
from pgnumeric.config import CodecConfig
from pgnumeric.errors import NumericError
from pgnumeric.models import wire_from_json, wire_to_dict

logger = structlog.get_logger()


def _parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation as err:
        raise argparse.ArgumentTypeError(f"not a decimal literal: {text!r}") from err


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnumeric",
        description="Convert decimals to and from PostgreSQL NUMERIC wire values",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Print the wire value as JSON")
    encode_parser.add_argument("value", type=_parse_decimal)

    decode_parser = subparsers.add_parser("decode", help="Decode a JSON wire value")
    decode_parser.add_argument("wire", help="Wire value as JSON")

    pack_parser = subparsers.add_parser("pack", help="Print the binary NUMERIC bytes as hex")
    pack_parser.add_argument("value", type=_parse_decimal)

    unpack_parser = subparsers.add_parser("unpack", help="Decode binary NUMERIC bytes given as hex")
    unpack_parser.add_argument("hex", nargs="+", help="Hex bytes (whitespace is ignored)")

    return parser


def run(args: argparse.Namespace, config: CodecConfig) -> str:
    """Execute a parsed command and return its output line."""
    if args.command == "encode":
        return json.dumps(wire_to_dict(encode(args.value, config)))
    if args.command == "decode":
        return str(decode(wire_from_json(args.wire)))
    if args.command == "pack":
        return pack(encode(args.value, config)).hex()
    if args.command == "unpack":
        return str(decode(unpack(bytes.fromhex("".join(args.hex)))))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = CodecConfig.from_env()
        output = run(args, config)
    except (NumericError, ValidationError, ValueError) as err:
        logger.debug("command_failed", command=args.command, error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
