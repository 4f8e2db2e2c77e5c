"""Domain model for filesystem discovery feeding the Markdown file list.

This package contains the non-rendering primitives:
- entry classification (file, directory, unknown)
- recursive file discovery in listing order
- the rendered-row datatype handed to the formatter
"""

from __future__ import annotations

from .types import FileSystemEntryType, RenderedLine
from .fs import classify_path, list_directory_names, walk_files

__all__ = [
    "FileSystemEntryType",
    "RenderedLine",
    "classify_path",
    "list_directory_names",
    "walk_files",
]
