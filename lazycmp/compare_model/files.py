"""Two-tier file comparison: stat signatures first, cached content reads second."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .cache import ComparisonCache, default_cache
from .metadata import MetadataProvider
from .signature import signature

logger = logging.getLogger(__name__)

BUFSIZE = 8 * 1024


def contents_equal(f1: str | os.PathLike[str], f2: str | os.PathLike[str]) -> bool:
    """Compare two files byte for byte in ``BUFSIZE`` chunks read in lockstep."""
    logger.debug("reading contents of %s and %s", f1, f2)
    with open(f1, "rb") as fp1, open(f2, "rb") as fp2:
        while True:
            b1 = fp1.read(BUFSIZE)
            b2 = fp2.read(BUFSIZE)
            if len(b1) != len(b2):
                return False
            if not b1:
                return True
            if b1 != b2:
                return False


class FileComparator:
    """Compare files by signature, falling back to memoized content reads.

    ``cache`` defaults to the process-wide cache, looked up on each call so
    ``configure_default_cache`` takes effect for existing comparators.
    """

    def __init__(
        self,
        cache: ComparisonCache | None = None,
        metadata: MetadataProvider | None = None,
    ) -> None:
        self._cache = cache
        self.metadata = metadata

    @property
    def cache(self) -> ComparisonCache:
        return self._cache if self._cache is not None else default_cache()

    def compare(
        self,
        f1: str | os.PathLike[str],
        f2: str | os.PathLike[str],
        shallow: bool = True,
    ) -> bool:
        """Return whether ``f1`` and ``f2`` are the same regular file content.

        With ``shallow`` true, identical ``(kind, size, mtime)`` signatures are
        accepted without reading either file. Raises ``OSError`` from stat or
        read failures.
        """
        s1 = signature(f1, follow_symlinks=True, metadata=self.metadata)
        s2 = signature(f2, follow_symlinks=True, metadata=self.metadata)

        if not s1.is_regular or not s2.is_regular:
            return False
        if shallow and s1 == s2:
            return True
        if s1.size != s2.size:
            return False

        cache = self.cache
        key = (os.fspath(f1), os.fspath(f2), s1, s2)
        outcome = cache.get(key)
        if outcome is not None:
            logger.debug("comparison cache hit for %s and %s", f1, f2)
            return outcome

        outcome = contents_equal(f1, f2)
        cache.put(key, outcome)
        return outcome

    def cmpfiles(
        self,
        a: str | os.PathLike[str],
        b: str | os.PathLike[str],
        common: Iterable[str],
        shallow: bool = True,
    ) -> tuple[list[str], list[str], list[str]]:
        """Compare ``a/name`` with ``b/name`` for every name in ``common``.

        Returns ``(match, mismatch, errors)``; names whose comparison raised
        ``OSError`` land in ``errors``.
        """
        match: list[str] = []
        mismatch: list[str] = []
        errors: list[str] = []
        for name in common:
            left = os.path.join(a, name)
            right = os.path.join(b, name)
            try:
                same = self.compare(left, right, shallow)
            except OSError as exc:
                logger.debug("could not compare %s and %s: %s", left, right, exc)
                errors.append(name)
                continue
            if same:
                match.append(name)
            else:
                mismatch.append(name)
        return match, mismatch, errors


_DEFAULT_COMPARATOR = FileComparator()


def cmp(f1: str | os.PathLike[str], f2: str | os.PathLike[str], shallow: bool = True) -> bool:
    """Compare two files using the process-wide comparison cache."""
    return _DEFAULT_COMPARATOR.compare(f1, f2, shallow)


def cmpfiles(
    a: str | os.PathLike[str],
    b: str | os.PathLike[str],
    common: Iterable[str],
    shallow: bool = True,
    comparator: FileComparator | None = None,
) -> tuple[list[str], list[str], list[str]]:
    """Compare common files in two directories; see ``FileComparator.cmpfiles``."""
    active = comparator if comparator is not None else _DEFAULT_COMPARATOR
    return active.cmpfiles(a, b, common, shallow)


__all__ = [
    "BUFSIZE",
    "contents_equal",
    "FileComparator",
    "cmp",
    "cmpfiles",
]
