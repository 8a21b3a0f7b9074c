"""Directory classification into common, one-sided, and funny entries."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from functools import partial
from pathlib import Path

from .files import FileComparator
from .metadata import MetadataProvider
from .signature import file_type_bits
from .types import DirectoryComparison

logger = logging.getLogger(__name__)

DEFAULT_IGNORES: tuple[str, ...] = (
    "RCS",
    "CVS",
    "tags",
    ".git",
    ".hg",
    ".bzr",
    "_darcs",
    "__pycache__",
)
DEFAULT_HIDE: tuple[str, ...] = (os.curdir, os.pardir)


def list_directory_names(directory: Path, skip: frozenset[str]) -> list[str]:
    """Return sorted child names of ``directory`` not present in ``skip``.

    Raises ``OSError`` when ``directory`` cannot be listed.
    """
    with os.scandir(directory) as entries:
        names = [entry.name for entry in entries if entry.name not in skip]
    names.sort()
    return names


def _type_bits_or_none(path: Path, metadata: MetadataProvider | None) -> int | None:
    try:
        return file_type_bits(path, follow_symlinks=True, metadata=metadata)
    except OSError as exc:
        logger.debug("could not stat %s: %s", path, exc)
        return None


def split_common_types(
    left: Path,
    right: Path,
    common: Iterable[str],
    metadata: MetadataProvider | None = None,
) -> tuple[list[str], list[str], list[str]]:
    """Partition ``common`` into ``(dirs, files, funny)`` by matching type bits."""
    dirs: list[str] = []
    files: list[str] = []
    funny: list[str] = []
    for name in common:
        left_bits = _type_bits_or_none(left / name, metadata)
        right_bits = _type_bits_or_none(right / name, metadata)
        if left_bits is None or right_bits is None or left_bits != right_bits:
            funny.append(name)
        elif stat.S_ISDIR(left_bits):
            dirs.append(name)
        elif stat.S_ISREG(left_bits):
            files.append(name)
        else:
            funny.append(name)
    return dirs, files, funny


def classify(
    left: str | os.PathLike[str],
    right: str | os.PathLike[str],
    ignore: Iterable[str] | None = None,
    hide: Iterable[str] | None = None,
    comparator: FileComparator | None = None,
    shallow: bool = True,
) -> DirectoryComparison:
    """Classify the immediate children of ``left`` and ``right``.

    ``ignore`` defaults to ``DEFAULT_IGNORES`` and ``hide`` to
    ``DEFAULT_HIDE``. Failing to list either directory raises ``OSError``;
    failures on individual common entries are reported as funny instead.
    Common regular files are compared shallowly unless ``shallow`` is false.
    """
    left_path = Path(left)
    right_path = Path(right)
    ignore_names = tuple(DEFAULT_IGNORES if ignore is None else ignore)
    hide_names = tuple(DEFAULT_HIDE if hide is None else hide)
    active = comparator if comparator is not None else FileComparator()
    skip = frozenset(ignore_names) | frozenset(hide_names)

    left_list = list_directory_names(left_path, skip)
    right_list = list_directory_names(right_path, skip)

    right_names = set(right_list)
    left_names = set(left_list)
    common = [name for name in left_list if name in right_names]
    left_only = [name for name in left_list if name not in right_names]
    right_only = [name for name in right_list if name not in left_names]

    common_dirs, common_files, common_funny = split_common_types(
        left_path,
        right_path,
        common,
        metadata=active.metadata,
    )
    same_files, diff_files, funny_files = active.cmpfiles(left_path, right_path, common_files, shallow=shallow)

    return DirectoryComparison(
        left=left_path,
        right=right_path,
        left_list=tuple(left_list),
        right_list=tuple(right_list),
        common=tuple(common),
        left_only=tuple(left_only),
        right_only=tuple(right_only),
        common_dirs=tuple(common_dirs),
        common_files=tuple(common_files),
        common_funny=tuple(common_funny),
        same_files=tuple(same_files),
        diff_files=tuple(diff_files),
        funny_files=tuple(funny_files),
        ignore=ignore_names,
        hide=hide_names,
        classify_subdir=partial(classify, ignore=ignore_names, hide=hide_names, comparator=active, shallow=shallow),
    )


__all__ = [
    "DEFAULT_IGNORES",
    "DEFAULT_HIDE",
    "list_directory_names",
    "split_common_types",
    "classify",
]
