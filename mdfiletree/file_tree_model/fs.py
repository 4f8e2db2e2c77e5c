"""Filesystem classification and recursive file discovery."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import TraversalError
from ..paths import join_path, normalize_separators
from .types import FileSystemEntryType

logger = logging.getLogger(__name__)


def classify_path(path: str | Path) -> FileSystemEntryType:
    """Return whether ``path`` is a file, a directory, or unknown.

    Symlinks are followed. Any ``OSError`` (missing entry, permission
    denial, broken link) yields ``UNKNOWN`` instead of propagating.
    """
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return FileSystemEntryType.UNKNOWN
    if stat.S_ISREG(mode):
        return FileSystemEntryType.FILE
    if stat.S_ISDIR(mode):
        return FileSystemEntryType.DIRECTORY
    return FileSystemEntryType.UNKNOWN


def list_directory_names(directory: str) -> list[str]:
    """List child names of ``directory`` in filesystem listing order.

    Raises ``TraversalError`` when the directory cannot be read.
    """
    try:
        return os.listdir(directory)
    except OSError as exc:
        raise TraversalError(directory, exc) from exc


def walk_files(root: str | Path, *, guard_cycles: bool = False) -> list[str]:
    """Return absolute forward-slash paths of every file under ``root``.

    Children are visited in listing order and directories are expanded in
    place, so each directory's files appear contiguously. Directories are
    never emitted themselves and unknown entries are skipped.

    ``guard_cycles`` keeps a visited set of canonical directory paths so a
    looping symlink structure terminates; without it such a tree recurses
    until the interpreter gives up.
    """
    root_path = normalize_separators(root)
    visited: set[str] = set()
    if guard_cycles:
        visited.add(os.path.realpath(root_path))

    def collect(directory: str) -> list[str]:
        files: list[str] = []
        for name in list_directory_names(directory):
            child_path = join_path(directory, name)
            entry_type = classify_path(child_path)

            if entry_type is FileSystemEntryType.DIRECTORY:
                if guard_cycles:
                    canonical = os.path.realpath(child_path)
                    if canonical in visited:
                        logger.debug("skipping already visited directory %s", child_path)
                        continue
                    visited.add(canonical)
                files.extend(collect(child_path))
                continue

            if entry_type is FileSystemEntryType.FILE:
                files.append(child_path)
                continue

            logger.debug("skipping unreadable or special entry %s", child_path)
        return files

    return collect(root_path)


__all__ = [
    "classify_path",
    "list_directory_names",
    "walk_files",
]
