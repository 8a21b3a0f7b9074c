"""Terminal coloring for comparison reports via Pygments.

A small ``RegexLexer`` tokenizes report lines; output goes through
``Terminal256Formatter`` so colors follow the chosen Pygments style.
"""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import RegexLexer, bygroups
from pygments.styles import get_style_by_name
from pygments.token import Generic, Keyword, Punctuation, String, Text
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


class ReportLexer(RegexLexer):
    """Lexer for ``format_report`` output."""

    name = "lazycmp report"
    aliases = ["lazycmp-report"]
    filenames: list[str] = []

    tokens = {
        "root": [
            (r"diff .*\n", Generic.Heading),
            (r"(Only in .*?)( : )(.*\n)", bygroups(Generic.Subheading, Punctuation, String)),
            (r"(Identical files)( : )(.*\n)", bygroups(Generic.Inserted, Punctuation, String)),
            (
                r"(Differing files|Trouble with common files|Common funny cases)( : )(.*\n)",
                bygroups(Generic.Deleted, Punctuation, String),
            ),
            (r"(Common subdirectories)( : )(.*\n)", bygroups(Keyword, Punctuation, String)),
            (r".*\n", Text),
        ],
    }


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise ``DEFAULT_STYLE``."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_report(text: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Colorize report ``text``; returns it unchanged when ``no_color`` is set."""
    if no_color or not text:
        return text
    return highlight(text, ReportLexer(), _formatter_for_style(normalize_style(style)))


__all__ = [
    "DEFAULT_STYLE",
    "ReportLexer",
    "normalize_style",
    "colorize_report",
]
