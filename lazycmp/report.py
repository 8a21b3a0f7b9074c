"""Plain-text reports over ``DirectoryComparison`` snapshots.

Closures are built by classifying common subdirectories on demand through
``DirectoryComparison.subdirs``; nothing here touches file contents directly.
"""

from __future__ import annotations

from collections.abc import Iterable

from .compare_model import DirectoryComparison


def _names(names: Iterable[str]) -> str:
    return repr(sorted(names))


def format_report(comparison: DirectoryComparison) -> str:
    """Render one comparison in ``filecmp.dircmp.report`` shape.

    Empty categories are left out; names within a category are sorted.
    """
    lines = [f"diff {comparison.left} {comparison.right}"]
    if comparison.left_only:
        lines.append(f"Only in {comparison.left} : {_names(comparison.left_only)}")
    if comparison.right_only:
        lines.append(f"Only in {comparison.right} : {_names(comparison.right_only)}")
    if comparison.same_files:
        lines.append(f"Identical files : {_names(comparison.same_files)}")
    if comparison.diff_files:
        lines.append(f"Differing files : {_names(comparison.diff_files)}")
    if comparison.funny_files:
        lines.append(f"Trouble with common files : {_names(comparison.funny_files)}")
    if comparison.common_dirs:
        lines.append(f"Common subdirectories : {_names(comparison.common_dirs)}")
    if comparison.common_funny:
        lines.append(f"Common funny cases : {_names(comparison.common_funny)}")
    return "\n".join(lines) + "\n"


def format_partial_closure(comparison: DirectoryComparison) -> str:
    """Report ``comparison`` plus each immediate common subdirectory."""
    parts = [format_report(comparison)]
    for _name, sub in sorted(comparison.subdirs().items()):
        parts.append("\n" + format_report(sub))
    return "".join(parts)


def format_full_closure(comparison: DirectoryComparison) -> str:
    """Report ``comparison`` and every common subdirectory, recursively."""
    parts: list[str] = []
    stack = [comparison]
    first = True
    while stack:
        current = stack.pop()
        parts.append(("" if first else "\n") + format_report(current))
        first = False
        subdirs = sorted(current.subdirs().items())
        stack.extend(sub for _name, sub in reversed(subdirs))
    return "".join(parts)


__all__ = [
    "format_report",
    "format_partial_closure",
    "format_full_closure",
]
