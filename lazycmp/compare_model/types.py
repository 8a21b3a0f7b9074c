"""Value types for file signatures, cache keys, and directory comparisons."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path


class FileKind(enum.Enum):
    """Coarse file type used by the file comparator."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class FileSignature:
    """Stat-derived ``(kind, size, mtime)`` triple.

    Equality and hashing are structural; ``mtime`` is compared as the exact
    float reported by stat, never rounded.
    """

    kind: FileKind
    size: int
    mtime: float

    @property
    def is_regular(self) -> bool:
        return self.kind is FileKind.REGULAR


CacheKey = tuple[str, str, FileSignature, FileSignature]


@dataclass(frozen=True)
class DirectoryComparison:
    """Snapshot classification of two directories' immediate children.

    Built once by ``classify``; it does not follow later filesystem changes.
    ``common_dirs``, ``common_files`` and ``common_funny`` partition
    ``common``; ``same_files``, ``diff_files`` and ``funny_files`` partition
    ``common_files``.
    """

    left: Path
    right: Path
    left_list: tuple[str, ...]
    right_list: tuple[str, ...]
    common: tuple[str, ...]
    left_only: tuple[str, ...]
    right_only: tuple[str, ...]
    common_dirs: tuple[str, ...]
    common_files: tuple[str, ...]
    common_funny: tuple[str, ...]
    same_files: tuple[str, ...]
    diff_files: tuple[str, ...]
    funny_files: tuple[str, ...]
    ignore: tuple[str, ...] = ()
    hide: tuple[str, ...] = ()
    classify_subdir: Callable[[Path, Path], DirectoryComparison] | None = field(
        default=None,
        repr=False,
        compare=False,
    )

    def subdirs(self) -> dict[str, DirectoryComparison]:
        """Classify each common subdirectory pair, keyed by name."""
        if self.classify_subdir is None:
            return {}
        return {
            name: self.classify_subdir(self.left / name, self.right / name)
            for name in self.common_dirs
        }


__all__ = [
    "FileKind",
    "FileSignature",
    "CacheKey",
    "DirectoryComparison",
]
