"""Command-line front end.

Run:
  typographer clean_quotes clean_ellipsis escape_html < in.txt
  python -m typographer.cli format_french --input chapitre.txt

Reads text, collapses whitespace on every line, applies each TRANSFORMATION
in order and writes the result. Exit status: 0 ok, 1 I/O or decoding error,
2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from typographer.env import config_from_env
from typographer.formatting.config import TypographyConfig
from typographer.logging_setup import configure_console_logging
from typographer.transforms import DESCRIPTIONS, Transformation, parse_transformations, transform_lines

logger = logging.getLogger(__name__)


def _transformations_help() -> str:
    return "\n".join(f"    {t.value}: {DESCRIPTIONS[t]}" for t in Transformation)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typographer",
        description="Read text, sequentially apply each TRANSFORMATION, and print the result.",
        epilog="valid transformations:\n"
        + _transformations_help()
        + "\n\nexample: typographer clean_quotes clean_ellipsis escape_html",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("transformations", nargs="*", metavar="TRANSFORMATION")
    parser.add_argument("-i", "--input", type=Path, default=None, help="Read from FILE instead of stdin")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write to FILE instead of stdout")
    parser.add_argument(
        "--threshold-quote",
        type=int,
        default=None,
        help="Max distance (characters) for pairing ambiguous quotes; 0 disables pairing (default: 20)",
    )
    parser.add_argument("--dashes", action="store_true", help="format_french also replaces -- and ---")
    parser.add_argument("--guillemets", action="store_true", help="format_french also replaces << and >>")
    parser.add_argument("--list", action="store_true", help="List transformations and exit")
    parser.add_argument("--log-level", default=None, help="Logging level on stderr (default: WARNING)")
    return parser


def _config_from_args(args: argparse.Namespace) -> TypographyConfig:
    config = config_from_env()
    if args.threshold_quote is not None:
        config = config.with_overrides(threshold_quote=max(0, args.threshold_quote))
    if args.dashes:
        config = config.with_overrides(dashes=True)
    if args.guillemets:
        config = config.with_overrides(guillemets=True)
    return config


def _read_input(path: Path | None) -> str:
    data = path.read_bytes() if path is not None else sys.stdin.buffer.read()
    return data.decode("utf-8-sig")


def _write_output(path: Path | None, text: str) -> None:
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    configure_console_logging(args.log_level)

    if args.list:
        print(_transformations_help())
        return 0

    try:
        parse_transformations(args.transformations)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        print("valid transformations are:", file=sys.stderr)
        print(_transformations_help(), file=sys.stderr)
        return 2

    config = _config_from_args(args)

    try:
        text = _read_input(args.input)
    except UnicodeDecodeError as e:
        logger.error("input is not valid UTF-8: %s", e)
        print(f"error: input is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read input: {e}", file=sys.stderr)
        return 1

    result = transform_lines(text, args.transformations, config)
    logger.info("processed %d characters with %s", len(text), args.transformations or "whitespace only")

    try:
        _write_output(args.output, result)
    except OSError as e:
        print(f"error: cannot write output: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
