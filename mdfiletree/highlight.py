"""Terminal syntax highlighting for printing generated Markdown.

Uses Pygments' Markdown lexer with a terminal formatter. Unknown style names
fall back to ``monokai`` and formatters are cached per style.
"""

from __future__ import annotations

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import MarkdownLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def normalize_style(style: str) -> str:
    """Validate/canonicalize requested style name with cache-backed checks."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_markdown(document: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``document`` with ANSI colors for terminal output."""
    if not document:
        return document
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_highlight(document, MarkdownLexer(), formatter)


__all__ = [
    "DEFAULT_STYLE",
    "normalize_style",
    "highlight_markdown",
]
