"""Markdown rendering for file-list rows and grouped documents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .file_tree_model.types import RenderedLine
from .paths import top_level_segment

LINK_STYLE_PATH = "path"
LINK_STYLE_NESTED = "nested"
LINK_STYLES = (LINK_STYLE_PATH, LINK_STYLE_NESTED)

NESTED_INDENT = "  "


def render_link(relative_path: str) -> str:
    """Render ``- [path](path)`` using the relative path for text and target."""
    return f"- [{relative_path}]({relative_path})"


def render_nested_link(relative_path: str) -> str:
    """Render a filename-only bullet indented under its top-level heading.

    Files directly inside a top-level directory get no indent; each deeper
    directory level adds two spaces.
    """
    segments = relative_path.split("/")
    filename = segments[-1]
    depth = max(0, len(segments) - 2)
    return f"{NESTED_INDENT * depth}- [{filename}]({relative_path})"


def renderer_for_style(link_style: str) -> Callable[[str], str]:
    """Return the single-path renderer for ``link_style``.

    Raises ``ValueError`` for unsupported style names.
    """
    if link_style == LINK_STYLE_PATH:
        return render_link
    if link_style == LINK_STYLE_NESTED:
        return render_nested_link
    raise ValueError(f"unknown link style: {link_style!r}")


def render_lines(relative_paths: Iterable[str], link_style: str = LINK_STYLE_PATH) -> list[RenderedLine]:
    """Render each path in order, keeping the path alongside its bullet text."""
    render = renderer_for_style(link_style)
    return [RenderedLine(path=path, text=render(path)) for path in relative_paths]


def heading_for(segment: str) -> str:
    """Return the Markdown heading line for one top-level segment."""
    return f"# {segment}"


def group_lines(lines: Sequence[RenderedLine], *, separator: bool = True) -> list[str]:
    """Insert a heading before each run of lines sharing a top-level segment.

    Single left-to-right scan. Group boundaries are detected by comparing the
    parsed top-level segment of each path with the previous one, so headings
    never repeat back-to-back. With ``separator`` a blank line closes each
    group before the next heading.
    """
    document: list[str] = []
    previous_segment: str | None = None
    for line in lines:
        segment = top_level_segment(line.path)
        if segment != previous_segment:
            if previous_segment is not None and separator:
                document.append("")
            document.append(heading_for(segment))
            previous_segment = segment
        document.append(line.text)
    return document


__all__ = [
    "LINK_STYLE_PATH",
    "LINK_STYLE_NESTED",
    "LINK_STYLES",
    "render_link",
    "render_nested_link",
    "renderer_for_style",
    "render_lines",
    "heading_for",
    "group_lines",
]
