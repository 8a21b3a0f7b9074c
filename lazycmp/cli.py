"""Command-line front door for lazycmp.

Parses two directory paths plus report options, classifies them, and prints
a single-level or recursive report.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .compare_model import FileComparator, classify, configure_default_cache
from .highlight import DEFAULT_STYLE, colorize_report
from .report import format_full_closure, format_report

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazycmp",
        description="Compare two directories by stat signature and content.",
    )
    parser.add_argument("folder_a", metavar="FOLDER_A", help="One folder you want to compare.")
    parser.add_argument("folder_b", metavar="FOLDER_B", help="Another folder you want to compare.")
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Compare common subdirectories recursively.",
    )
    parser.add_argument(
        "--deep",
        action="store_true",
        help="Read file contents even when size and mtime match.",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        metavar="NAME",
        default=None,
        help="Name to ignore; repeatable. Replaces the default ignore list.",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for colored output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log comparison details to stderr.")
    return parser


def _require_directory(raw: str) -> Path:
    path = Path(raw)
    if not path.is_dir():
        raise SystemExit(f"Directory not found: {path}")
    return path


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, compare two directories, and print the report.

    Flags override persisted config; config overrides built-in defaults.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    left = _require_directory(args.folder_a)
    right = _require_directory(args.folder_b)

    cache_max_size = config.load_cache_max_size()
    if cache_max_size is not None:
        configure_default_cache(cache_max_size)

    ignore = args.ignore if args.ignore is not None else config.load_ignore_names()
    style = args.style or config.load_style_name() or DEFAULT_STYLE
    no_color = args.no_color or not sys.stdout.isatty()

    try:
        comparison = classify(left, right, ignore=ignore, comparator=FileComparator(), shallow=not args.deep)
        text = format_full_closure(comparison) if args.recursive else format_report(comparison)
    except OSError as exc:
        logger.debug("comparison of %s and %s failed", left, right, exc_info=True)
        raise SystemExit(f"Cannot compare {left} and {right}: {exc}") from exc

    sys.stdout.write(colorize_report(text, style=style, no_color=no_color))


if __name__ == "__main__":
    main()
