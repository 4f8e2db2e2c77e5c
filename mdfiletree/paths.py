"""Forward-slash path string helpers shared by walker, filter, and renderer."""

from __future__ import annotations

import os
from pathlib import Path


def normalize_separators(path: str | Path) -> str:
    """Return ``path`` as a string with backslashes turned into ``/``."""
    return os.fspath(path).replace("\\", "/")


def join_path(directory: str, name: str) -> str:
    """Join one child name onto a forward-slash directory string."""
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


def relative_to_root(path: str, root: str | Path) -> str:
    """Strip the ``<root>/`` prefix from ``path`` and normalize separators.

    Paths outside ``root`` are returned normalized but otherwise unchanged.
    """
    normalized = normalize_separators(path)
    prefix = normalize_separators(root)
    if not prefix.endswith("/"):
        prefix += "/"
    if normalized.startswith(prefix):
        return normalized[len(prefix):]
    return normalized


def top_level_segment(relative_path: str) -> str:
    """Return the text before the first ``/`` (the whole path when absent)."""
    return relative_path.split("/", 1)[0]


def directory_segments(relative_path: str) -> list[str]:
    """Return the directory components of ``relative_path`` (filename excluded)."""
    return relative_path.split("/")[:-1]


__all__ = [
    "normalize_separators",
    "join_path",
    "relative_to_root",
    "top_level_segment",
    "directory_segments",
]
