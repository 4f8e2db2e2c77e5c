"""Public package surface for mdfiletree.

Exports ``main`` for programmatic CLI invocation and the pipeline entry
points for library use. Implementation lives in submodules.
"""

from __future__ import annotations

from .config import GeneratorSettings
from .errors import MdFileTreeError, OutputWriteFailure, TraversalError
from .pipeline import build_markdown_file_tree, write_markdown_file_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint so library use does not load Pygments."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "main",
    "GeneratorSettings",
    "MdFileTreeError",
    "OutputWriteFailure",
    "TraversalError",
    "build_markdown_file_tree",
    "write_markdown_file_tree",
]
