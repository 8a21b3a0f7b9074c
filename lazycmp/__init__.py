"""Public package surface for lazycmp.

Re-exports the ``filecmp``-style comparison API and ``main`` for
programmatic CLI invocation. Implementation lives in ``lazycmp.compare_model``.
"""

from __future__ import annotations

from .compare_model import (
    DEFAULT_HIDE,
    DEFAULT_IGNORES,
    ComparisonCache,
    DirectoryComparison,
    FileComparator,
    FileKind,
    FileSignature,
    classify,
    clear_cache,
    cmp,
    cmpfiles,
    signature,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "DEFAULT_HIDE",
    "DEFAULT_IGNORES",
    "ComparisonCache",
    "DirectoryComparison",
    "FileComparator",
    "FileKind",
    "FileSignature",
    "classify",
    "clear_cache",
    "cmp",
    "cmpfiles",
    "signature",
    "main",
]
