"""Command-line front door for mdfiletree.

Parses CLI options, resolves the root directory, and merges settings from
user config, the per-root override file, and flags. Then runs the pipeline
and either writes the output file or prints the document.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import GeneratorSettings, load_generator_settings, save_generator_settings
from .errors import MdFileTreeError
from .highlight import DEFAULT_STYLE, highlight_markdown
from .pipeline import build_markdown_file_tree, write_markdown_file_tree
from .render import LINK_STYLE_NESTED

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _non_empty(value: str) -> str:
    """argparse type for non-blank string values."""
    stripped = value.strip()
    if not stripped:
        raise argparse.ArgumentTypeError("value must not be empty")
    return stripped


def _ignore_token(value: str) -> str:
    """argparse type for ignore tokens; kept verbatim since matching is literal."""
    if not value:
        raise argparse.ArgumentTypeError("ignore token must not be empty")
    return value


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def _apply_cli_overrides(settings: GeneratorSettings, args: argparse.Namespace) -> GeneratorSettings:
    """Layer explicit command-line flags over configured settings."""
    if args.output is not None:
        settings = replace(settings, output_filename=args.output)
    if args.ignore:
        settings = replace(settings, ignore=settings.ignore + tuple(args.ignore))
    if args.no_separator:
        settings = replace(settings, group_separator=False)
    if args.nested:
        settings = replace(settings, link_style=LINK_STYLE_NESTED)
    if args.include_vcs:
        settings = replace(settings, exclude_structural=False)
    if args.guard_cycles:
        settings = replace(settings, guard_cycles=True)
    return settings


def _print_document(document: str, style: str, no_color: bool) -> None:
    if not no_color and sys.stdout.isatty():
        document = highlight_markdown(document, style)
    sys.stdout.write(document)
    if document and not document.endswith("\n"):
        sys.stdout.write("\n")


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and generate the Markdown file list for a root.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Write a Markdown link list of every file under a directory, grouped by top-level folder."
    )
    parser.add_argument("root", nargs="?", default=None, help="Root directory. Defaults to current directory.")
    parser.add_argument("--output", type=_non_empty, default=None, help="Output filename inside the root (default: list.md).")
    parser.add_argument(
        "--ignore",
        action="append",
        type=_ignore_token,
        default=[],
        metavar="TOKEN",
        help="Skip any path containing TOKEN. May be repeated; adds to configured tokens.",
    )
    parser.add_argument("--no-separator", action="store_true", help="Do not put blank lines between groups.")
    parser.add_argument("--nested", action="store_true", help="Indent filename-only links by directory depth.")
    parser.add_argument("--include-vcs", action="store_true", help="Keep .git/.hg/.svn contents in the list.")
    parser.add_argument("--guard-cycles", action="store_true", help="Skip directories already visited through symlinks.")
    parser.add_argument("--stdout", action="store_true", help="Print the document instead of writing the output file.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for --stdout highlighting.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--save", action="store_true", help="Persist the resulting settings to the user config file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    args = parser.parse_args()

    _configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.root or default_path)
    if not root.is_dir():
        raise SystemExit(f"Root directory not found: {root}")

    settings = _apply_cli_overrides(load_generator_settings(root), args)
    if args.save:
        save_generator_settings(settings)
        logger.debug("saved settings to user config")

    try:
        if args.stdout:
            _print_document(build_markdown_file_tree(root, settings), args.style, args.no_color)
            return
        write_markdown_file_tree(root, settings)
    except MdFileTreeError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
