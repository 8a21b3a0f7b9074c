"""Stat signatures used as cheap equality proofs and cache keys."""

from __future__ import annotations

import os
import stat

from .metadata import MetadataProvider, StatResult, default_metadata_provider
from .types import FileKind, FileSignature


def kind_for_mode(mode: int) -> FileKind:
    """Collapse ``S_IFMT`` bits into regular, directory, or other."""
    if stat.S_ISREG(mode):
        return FileKind.REGULAR
    if stat.S_ISDIR(mode):
        return FileKind.DIRECTORY
    return FileKind.OTHER


def signature_from_stat(st: StatResult) -> FileSignature:
    return FileSignature(kind=kind_for_mode(st.st_mode), size=int(st.st_size), mtime=float(st.st_mtime))


def signature(
    path: str | os.PathLike[str],
    follow_symlinks: bool = True,
    metadata: MetadataProvider | None = None,
) -> FileSignature:
    """Return the signature of ``path``.

    Raises ``OSError`` when ``path`` cannot be stat'ed, including broken
    symlinks when ``follow_symlinks`` is true.
    """
    provider = metadata if metadata is not None else default_metadata_provider()
    return signature_from_stat(provider.stat(path, follow_symlinks=follow_symlinks))


def file_type_bits(
    path: str | os.PathLike[str],
    follow_symlinks: bool = True,
    metadata: MetadataProvider | None = None,
) -> int:
    """Return the raw ``S_IFMT`` bits of ``path``; raises ``OSError``."""
    provider = metadata if metadata is not None else default_metadata_provider()
    return stat.S_IFMT(provider.stat(path, follow_symlinks=follow_symlinks).st_mode)


__all__ = [
    "kind_for_mode",
    "signature_from_stat",
    "signature",
    "file_type_bits",
]
