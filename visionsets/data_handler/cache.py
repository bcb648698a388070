"""
Cache Resolver.

Decides whether a dataset must be (re)downloaded by checking that every
expected file is present under the cache root.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def needs_download(
    expected_relative_paths: Iterable[str | Path],
    cache_root: Path,
    force: bool = False,
) -> bool:
    """
    Returns True if a download is required.

    A download is required when ``force`` is set, or when any expected path
    under ``cache_root`` is not an existing regular file. Only existence is
    checked: a truncated file left by an interrupted download counts as
    present, and ``force`` is the way to recover from it.

    Args:
        expected_relative_paths: Cache-relative file paths.
        cache_root: Directory the paths are relative to.
        force: Always report that a download is required.

    Returns:
        bool: Whether the caller should fetch the dataset.
    """
    if force:
        return True

    return not all((cache_root / rel).is_file() for rel in expected_relative_paths)
