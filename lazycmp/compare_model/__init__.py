"""Domain model for comparing files and directories.

This package contains the non-UI comparison engine:
- platform metadata providers and stat signatures
- the bounded comparison cache for content-read outcomes
- the two-tier file comparator plus ``cmpfiles``
- the directory classifier producing ``DirectoryComparison`` snapshots
"""

from __future__ import annotations

from .types import CacheKey, DirectoryComparison, FileKind, FileSignature
from .metadata import (
    MetadataProvider,
    PosixMetadataProvider,
    StatResult,
    WindowsMetadataProvider,
    attributes_to_mode,
    default_metadata_provider,
)
from .signature import file_type_bits, kind_for_mode, signature, signature_from_stat
from .cache import MAX_CACHE_SIZE, ComparisonCache, clear_cache, configure_default_cache, default_cache
from .files import BUFSIZE, FileComparator, cmp, cmpfiles, contents_equal
from .directories import DEFAULT_HIDE, DEFAULT_IGNORES, classify, list_directory_names, split_common_types

__all__ = [
    "CacheKey",
    "DirectoryComparison",
    "FileKind",
    "FileSignature",
    "MetadataProvider",
    "PosixMetadataProvider",
    "StatResult",
    "WindowsMetadataProvider",
    "attributes_to_mode",
    "default_metadata_provider",
    "file_type_bits",
    "kind_for_mode",
    "signature",
    "signature_from_stat",
    "MAX_CACHE_SIZE",
    "ComparisonCache",
    "clear_cache",
    "configure_default_cache",
    "default_cache",
    "BUFSIZE",
    "FileComparator",
    "cmp",
    "cmpfiles",
    "contents_equal",
    "DEFAULT_HIDE",
    "DEFAULT_IGNORES",
    "classify",
    "list_directory_names",
    "split_common_types",
]
