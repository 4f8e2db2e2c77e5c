"""Directory-to-Markdown pipeline: walk, filter, render, group, write.

``build_markdown_file_tree`` returns the document text without touching the
output file. ``write_markdown_file_tree`` builds the whole document first and
only then writes it, so traversal failures never leave a partial file.
"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path

from .config import GeneratorSettings
from .errors import OutputWriteFailure
from .file_tree_model import walk_files
from .filtering import PathFilter
from .paths import normalize_separators, relative_to_root
from .render import group_lines, render_lines

logger = logging.getLogger(__name__)


def path_filter_for(settings: GeneratorSettings) -> PathFilter:
    """Build the path filter described by ``settings``."""
    return PathFilter(
        ignore=settings.ignore,
        require_directory=True,
        structural_excludes=settings.structural_excludes if settings.exclude_structural else (),
    )


def output_relative_path(settings: GeneratorSettings) -> str:
    """Return the output file as a root-relative path, so a rerun never lists it."""
    return posixpath.normpath(normalize_separators(settings.output_filename))


def collect_relative_paths(root: str | Path, settings: GeneratorSettings) -> list[str]:
    """Walk ``root`` and return retained root-relative paths in discovery order."""
    root_path = normalize_separators(root)
    absolute_paths = walk_files(root_path, guard_cycles=settings.guard_cycles)
    relative_paths = [relative_to_root(path, root_path) for path in absolute_paths]
    output_relative = output_relative_path(settings)
    retained = [path for path in path_filter_for(settings).apply(relative_paths) if path != output_relative]
    logger.debug("walked %d files under %s, retained %d", len(absolute_paths), root_path, len(retained))
    return retained


def build_markdown_file_tree(root: str | Path, settings: GeneratorSettings | None = None) -> str:
    """Return the grouped Markdown link list for every retained file under ``root``.

    Raises ``TraversalError`` when a directory cannot be listed.
    """
    active = settings or GeneratorSettings()
    relative_paths = collect_relative_paths(root, active)
    lines = render_lines(relative_paths, active.link_style)
    document = group_lines(lines, separator=active.group_separator)
    return "\n".join(document)


def output_path_for(root: str | Path, settings: GeneratorSettings) -> Path:
    return Path(root) / settings.output_filename


def write_markdown_file_tree(root: str | Path, settings: GeneratorSettings | None = None) -> Path:
    """Generate the document for ``root`` and write it as UTF-8, replacing any old file.

    Returns the written path. Raises ``TraversalError`` before anything is
    written, or ``OutputWriteFailure`` when the destination is not writable.
    """
    active = settings or GeneratorSettings()
    document = build_markdown_file_tree(root, active)
    destination = output_path_for(root, active)
    try:
        destination.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteFailure(destination, exc) from exc
    logger.info("wrote %s", destination)
    return destination


__all__ = [
    "path_filter_for",
    "output_relative_path",
    "collect_relative_paths",
    "build_markdown_file_tree",
    "output_path_for",
    "write_markdown_file_tree",
]
