"""
QUIC varint command-line tool.

Encode integers to their wire form, decode wire bytes back to integers, or ask
how many bytes a value needs.

Usage::

    python -m quic_varint encode 37 15293 494878333
    python -m quic_varint decode 257bbd9d7f3e7d
    python -m quic_varint size 1073741824

Commands:
    encode VALUE [VALUE ...]   Print the hex encoding of each value
    decode HEX                 Print every varint found in a hex string
    size VALUE                 Print the minimal encoded length of a value

Options:
    -v, --verbose              Enable debug logging
    --no-color                 Disable colored logging output
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from quic_varint import config
from quic_varint.buffer import ByteCursor
from quic_varint.types import EncodeError
from quic_varint.varint import encode_varint, read, size

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        # Get color for this level
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        # Format timestamp in cyan
        timestamp = self.formatTime(record, self.datefmt)
        colored_time = f"{self.CYAN}{timestamp}{self.RESET}"

        # Format level name with color
        levelname = f"{color}{record.levelname:8}{self.RESET}"

        # Format logger name in blue
        name = f"{self.BLUE}{record.name}{self.RESET}"

        # Format message
        message = record.getMessage()

        return f"{colored_time} {levelname} {name}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL)

    # Create handler
    handler = logging.StreamHandler()
    handler.setLevel(level)

    # Use colored formatter unless disabled
    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    # Configure root logger
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def parse_value(text: str) -> int:
    """
    Parse a decimal or 0x-prefixed hexadecimal integer argument.

    Raises:
        argparse.ArgumentTypeError: If `text` is not an integer.
    """
    try:
        return int(text, 0)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from e


def cmd_encode(values: Sequence[int]) -> int:
    """Print the hex encoding of each value, stopping at the first failure."""
    for value in values:
        try:
            encoded = encode_varint(value)
        except EncodeError as e:
            logger.error("Cannot encode %d: %s", value, e)
            return 1
        logger.debug("Encoded %d as %d bytes", value, len(encoded))
        print(encoded.hex())
    return 0


def cmd_decode(hex_data: str) -> int:
    """Print every varint packed back to back in `hex_data`."""
    try:
        data = bytes.fromhex(hex_data)
    except ValueError as e:
        logger.error("Invalid hex input: %s", e)
        return 1

    cursor = ByteCursor(data)
    while cursor.has_remaining():
        start = cursor.position
        value = read(cursor)
        if value is None:
            logger.error("Truncated varint at byte offset %d", start)
            return 1
        logger.debug("Decoded %d from bytes %d..%d", value, start, cursor.position)
        print(value)
    return 0


def cmd_size(value: int) -> int:
    """Print the minimal encoded length of `value`."""
    octets = size(value)
    if octets is None:
        logger.error("%d is not representable as a varint", value)
        return 1
    print(octets)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="quic-varint",
        description="QUIC variable-length integer codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Encode integers to hex")
    encode.add_argument("values", nargs="+", type=parse_value, help="Values to encode")

    decode = commands.add_parser("decode", help="Decode varints from hex")
    decode.add_argument("hex_data", help="Hex string of back-to-back varints")

    size_cmd = commands.add_parser("size", help="Minimal encoded length of a value")
    size_cmd.add_argument("value", type=parse_value, help="Value to measure")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    if args.command == "encode":
        return cmd_encode(args.values)
    if args.command == "decode":
        return cmd_decode(args.hex_data)
    return cmd_size(args.value)


if __name__ == "__main__":
    sys.exit(main())
