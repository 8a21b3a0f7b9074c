"""Platform metadata providers mapping OS stat calls to one record shape.

POSIX hosts pass ``st_mode`` through; Windows hosts synthesize Unix-style mode
bits from file attributes so the comparator sees the same type bits everywhere.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Protocol

FILE_ATTRIBUTE_READONLY = 0x1
FILE_ATTRIBUTE_DIRECTORY = 0x10


@dataclass(frozen=True)
class StatResult:
    """Uniform stat record returned by every metadata provider."""

    st_mode: int
    st_ino: int
    st_dev: int
    st_nlink: int
    st_uid: int
    st_gid: int
    st_size: int
    st_atime: float
    st_mtime: float
    st_ctime: float


class MetadataProvider(Protocol):
    def stat(self, path: str | os.PathLike[str], follow_symlinks: bool = True) -> StatResult:
        """Return metadata for ``path`` or raise ``OSError``."""
        ...


class PosixMetadataProvider:
    """Metadata provider backed by ``os.stat`` mode bits."""

    def stat(self, path: str | os.PathLike[str], follow_symlinks: bool = True) -> StatResult:
        st = os.stat(path, follow_symlinks=follow_symlinks)
        return StatResult(
            st_mode=st.st_mode,
            st_ino=st.st_ino,
            st_dev=st.st_dev,
            st_nlink=st.st_nlink,
            st_uid=st.st_uid,
            st_gid=st.st_gid,
            st_size=st.st_size,
            st_atime=st.st_atime,
            st_mtime=st.st_mtime,
            st_ctime=st.st_ctime,
        )


def attributes_to_mode(attributes: int) -> int:
    """Synthesize Unix mode bits from Windows ``FILE_ATTRIBUTE_*`` flags.

    Directories become ``S_IFDIR | 0o111`` and everything else ``S_IFREG``.
    Read-only entries get ``0o444``, writable ones ``0o666``.
    """
    if attributes & FILE_ATTRIBUTE_DIRECTORY:
        mode = stat.S_IFDIR | 0o111
    else:
        mode = stat.S_IFREG
    if attributes & FILE_ATTRIBUTE_READONLY:
        mode |= 0o444
    else:
        mode |= 0o666
    return mode


class WindowsMetadataProvider:
    """Metadata provider that derives mode bits from file attributes."""

    def stat(self, path: str | os.PathLike[str], follow_symlinks: bool = True) -> StatResult:
        st = os.stat(path, follow_symlinks=follow_symlinks)
        attributes = int(getattr(st, "st_file_attributes", 0))
        return StatResult(
            st_mode=attributes_to_mode(attributes),
            st_ino=0,
            st_dev=0,
            st_nlink=0,
            st_uid=0,
            st_gid=0,
            st_size=st.st_size,
            st_atime=st.st_atime,
            st_mtime=st.st_mtime,
            st_ctime=st.st_ctime,
        )


_DEFAULT_PROVIDER: MetadataProvider | None = None


def default_metadata_provider() -> MetadataProvider:
    """Return the process-wide provider for the current platform."""
    global _DEFAULT_PROVIDER
    if _DEFAULT_PROVIDER is None:
        if os.name == "nt":
            _DEFAULT_PROVIDER = WindowsMetadataProvider()
        else:
            _DEFAULT_PROVIDER = PosixMetadataProvider()
    return _DEFAULT_PROVIDER


__all__ = [
    "StatResult",
    "MetadataProvider",
    "PosixMetadataProvider",
    "WindowsMetadataProvider",
    "attributes_to_mode",
    "default_metadata_provider",
]
