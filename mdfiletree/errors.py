"""Exception types raised by the file-list pipeline."""

from __future__ import annotations

from pathlib import Path


class MdFileTreeError(Exception):
    """Base class for failures that abort a file-list run."""


class TraversalError(MdFileTreeError):
    """A directory under the root could not be listed."""

    def __init__(self, directory: str | Path, cause: OSError) -> None:
        self.directory = str(directory)
        self.cause = cause
        super().__init__(f"Cannot read directory {self.directory}: {cause.strerror or cause}")


class OutputWriteFailure(MdFileTreeError):
    """The generated document could not be written to its destination."""

    def __init__(self, destination: Path, cause: OSError) -> None:
        self.destination = destination
        self.cause = cause
        super().__init__(f"Cannot write {destination}: {cause.strerror or cause}")


__all__ = [
    "MdFileTreeError",
    "TraversalError",
    "OutputWriteFailure",
]
