"""Inclusion rules deciding which relative paths reach the Markdown list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .paths import directory_segments

VCS_METADATA_DIRS = (".git", ".hg", ".svn")


@dataclass(frozen=True)
class PathFilter:
    """Pure per-path inclusion check.

    ``ignore`` tokens match by substring containment anywhere in the path.
    ``require_directory`` drops root-level files, which have no top-level
    segment to group under. ``structural_excludes`` are directory names
    matched segment-exact against every directory component.
    """

    ignore: tuple[str, ...] = ()
    require_directory: bool = True
    structural_excludes: tuple[str, ...] = ()

    def included(self, relative_path: str) -> bool:
        """Return whether ``relative_path`` passes every rule."""
        for token in self.ignore:
            if token and token in relative_path:
                return False

        if self.require_directory and "/" not in relative_path:
            return False

        if self.structural_excludes:
            excluded = set(self.structural_excludes)
            if any(segment in excluded for segment in directory_segments(relative_path)):
                return False
        return True

    def apply(self, relative_paths: Iterable[str]) -> list[str]:
        """Keep paths that pass ``included`` in their original order."""
        return [path for path in relative_paths if self.included(path)]


__all__ = [
    "VCS_METADATA_DIRS",
    "PathFilter",
]
