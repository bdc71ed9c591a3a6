# borders/cli.py
"""Command-line front end for the table formatter.

Usage:
    borders row hello world
    borders map Jon=38 Jake=25 --key-header Name --value-header Age
    echo "some text" | borders --style double box
    borders --style ascii demo
    borders styles

Settings not given on the command line fall back to BORDERS_STYLE,
BORDERS_KEY_HEADER and BORDERS_VALUE_HEADER (optionally loaded from a
.env file).
"""

import argparse
import logging
import sys
from collections import Counter
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from .config import FormatterConfig, load_config, load_env_file
from .console_encoding import configure_utf8_output
from .errors import BordersError
from .formatter import BorderFormatter, create_formatter
from .styles import ASCII, DOUBLE, STYLES

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def _unescape_newlines(text: str) -> str:
    """Turn literal backslash-n sequences typed on a shell into line feeds."""
    return text.replace("\\n", "\n")


def _parse_pairs(parser: argparse.ArgumentParser, items: List[str]) -> Dict[str, str]:
    pairs: Dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep:
            parser.error(f"expected KEY=VALUE, got {item!r}")
        pairs[_unescape_newlines(key)] = _unescape_newlines(value)
    return pairs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="borders",
        description="Render values as box-drawn tables",
    )
    parser.add_argument(
        "--style",
        default=None,
        help="Style name (thin, double, ascii) or 11 glyphs (default: $BORDERS_STYLE or thin)",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env in CWD)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log layout decisions to stderr",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    row = commands.add_parser("row", help="Format items as a single-row table")
    row.add_argument("items", nargs="*", help="Cell values (\\n starts a new line)")

    mapping = commands.add_parser("map", help="Format KEY=VALUE pairs as a two-column table")
    mapping.add_argument("pairs", nargs="*", metavar="KEY=VALUE")
    mapping.add_argument("--key-header", default=None, help="Header of the key column")
    mapping.add_argument("--value-header", default=None, help="Header of the value column")
    mapping.add_argument(
        "--no-headers",
        action="store_true",
        help="Omit the header row",
    )

    box = commands.add_parser("box", help="Draw a border around text (stdin when omitted)")
    box.add_argument("text", nargs="?", default=None)
    box.add_argument(
        "--debug",
        action="store_true",
        help="Quote the text as a debug representation",
    )

    commands.add_parser("demo", help="Print a tour of every formatting operation")
    commands.add_parser("styles", help="List the built-in styles")
    return parser


def run_demo(formatter: BorderFormatter) -> List[str]:
    """Render the sample tables, using formatter's style where none is fixed."""
    double = BorderFormatter(DOUBLE)
    ascii_ = BorderFormatter(ASCII)

    counts = Counter("hello world, how are you doing today?")
    nested = formatter.format_hash_map_headers({"   ": "   "}, "   ", "   ")

    return [
        formatter.format_iter(iter([0, 5, 12, 3, 234, 124, 4234, 234, 234, 234])),
        formatter.format_slice(["hello", "world"]),
        formatter.format_slice(["hello\nworld", "goodbye\nworld"]),
        formatter.format_hash_map(counts),
        double.format_display("Hello World!"),
        double.format_debug("Hello World!"),
        double.format_debug(list(range(1, 10))),
        nested,
        ascii_.format_display(double.format_display(nested)),
        formatter.format_slice([0, 1, 2, 3, 4]),
        formatter.format_hash_map({"Jon": 38, "Jake": 25, "Josh": 17}),
        formatter.format_display("hello"),
        formatter.format_debug("hello"),
    ]


def run_styles() -> List[str]:
    blocks = []
    for name, style in STYLES.items():
        blocks.append(name)
        blocks.append(
            BorderFormatter(style).format_hash_map_headers({"a": 1, "b": 2}, "key", "value")
        )
    return blocks


def _headers(args: argparse.Namespace, config: FormatterConfig) -> List[str]:
    if args.no_headers:
        return ["", ""]
    key_header = config.key_header if args.key_header is None else args.key_header
    value_header = config.value_header if args.value_header is None else args.value_header
    return [key_header, value_header]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    configure_utf8_output()
    errors = Console(stderr=True, highlight=False)

    load_env_file(args.env_file)
    try:
        config = load_config()
        formatter = create_formatter(args.style, config=config)
    except BordersError as exc:
        errors.print(f"[bold red]error:[/] {escape(str(exc))}")
        return EXIT_USAGE
    logger.debug("Formatting %s with %r", args.command, formatter)

    if args.command == "row":
        blocks = [formatter.format_slice([_unescape_newlines(item) for item in args.items])]
    elif args.command == "map":
        key_header, value_header = _headers(args, config)
        pairs = _parse_pairs(parser, args.pairs)
        blocks = [formatter.format_hash_map_headers(pairs, key_header, value_header)]
    elif args.command == "box":
        text = sys.stdin.read() if args.text is None else _unescape_newlines(args.text)
        if args.debug:
            blocks = [formatter.format_debug(text)]
        else:
            blocks = [formatter.format_display(text)]
    elif args.command == "demo":
        blocks = run_demo(formatter)
    else:
        blocks = run_styles()

    # Written as-is; rich would expand tabs and drop control characters
    for block in blocks:
        sys.stdout.write(block + "\n")
    return EXIT_OK
