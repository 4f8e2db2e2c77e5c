"""Domain datatypes for filesystem entries and rendered file-list rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileSystemEntryType(Enum):
    """Classification of one filesystem entry as seen by the tree walker.

    ``UNKNOWN`` covers stat failures (missing entries, permission denial,
    broken links) and exotic entry kinds such as sockets or FIFOs.
    """

    FILE = "file"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RenderedLine:
    """One Markdown bullet plus the relative path it was rendered from."""

    path: str
    text: str


__all__ = [
    "FileSystemEntryType",
    "RenderedLine",
]
