"""Persistent JSON config helpers.

Stores the output filename, ignore tokens, and formatting preferences.
All access is defensive: malformed or missing config falls back safely.
A per-root ``.mdfiletree.json`` with the same keys overrides user config.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .filtering import VCS_METADATA_DIRS
from .render import LINK_STYLE_PATH, LINK_STYLES

APP_NAME = "mdfiletree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
ROOT_CONFIG_FILENAME = ".mdfiletree.json"
DEFAULT_OUTPUT_FILENAME = "list.md"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorSettings:
    """Resolved settings for one file-list run."""

    output_filename: str = DEFAULT_OUTPUT_FILENAME
    ignore: tuple[str, ...] = ()
    exclude_structural: bool = True
    structural_excludes: tuple[str, ...] = VCS_METADATA_DIRS
    group_separator: bool = True
    link_style: str = LINK_STYLE_PATH
    guard_cycles: bool = False


def _read_json_object(path: Path) -> dict[str, object]:
    """Return the JSON object stored at ``path`` or ``{}`` on any failure."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_config() -> dict[str, object]:
    """Return the user-level settings object, or ``{}`` when none is usable."""
    return _read_json_object(CONFIG_PATH)


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` to the user settings file, creating its directory.

    A read-only or unreachable config location is logged and skipped.
    """
    payload = json.dumps(data, indent=2, sort_keys=True) + "\n"
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(payload, encoding="utf-8")
    except OSError as exc:
        logger.warning("could not save settings to %s: %s", CONFIG_PATH, exc)


def load_root_config(root: Path) -> dict[str, object]:
    """Load the per-root override object from ``<root>/.mdfiletree.json``."""
    return _read_json_object(root / ROOT_CONFIG_FILENAME)


def _coerce_output_filename(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _coerce_ignore(value: object) -> tuple[str, ...] | None:
    """Keep only non-empty string tokens; non-list values are rejected."""
    if not isinstance(value, list):
        return None
    return tuple(token for token in value if isinstance(token, str) and token)


def _coerce_bool(value: object) -> bool | None:
    return value if isinstance(value, bool) else None


def _coerce_link_style(value: object) -> str | None:
    return value if isinstance(value, str) and value in LINK_STYLES else None


def settings_from_mapping(
    data: dict[str, object],
    base: GeneratorSettings | None = None,
) -> GeneratorSettings:
    """Overlay valid keys from ``data`` onto ``base``.

    Invalid or missing values keep the corresponding ``base`` value.
    """
    settings = base or GeneratorSettings()

    output_filename = _coerce_output_filename(data.get("outputFilename"))
    if output_filename is not None:
        settings = replace(settings, output_filename=output_filename)

    ignore = _coerce_ignore(data.get("ignore"))
    if ignore is not None:
        settings = replace(settings, ignore=ignore)

    exclude_vcs = _coerce_bool(data.get("excludeVcs"))
    if exclude_vcs is not None:
        settings = replace(settings, exclude_structural=exclude_vcs)

    group_separator = _coerce_bool(data.get("groupSeparator"))
    if group_separator is not None:
        settings = replace(settings, group_separator=group_separator)

    link_style = _coerce_link_style(data.get("linkStyle"))
    if link_style is not None:
        settings = replace(settings, link_style=link_style)

    return settings


def load_generator_settings(root: Path | None = None) -> GeneratorSettings:
    """Resolve settings from user config, then the per-root override file."""
    settings = settings_from_mapping(load_config())
    if root is not None:
        settings = settings_from_mapping(load_root_config(root), base=settings)
    return settings


def save_generator_settings(settings: GeneratorSettings) -> None:
    """Persist the user-configurable fields of ``settings`` to user config."""
    config = load_config()
    config["outputFilename"] = settings.output_filename
    config["ignore"] = list(settings.ignore)
    config["excludeVcs"] = settings.exclude_structural
    config["groupSeparator"] = settings.group_separator
    config["linkStyle"] = settings.link_style
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_OUTPUT_FILENAME",
    "ROOT_CONFIG_FILENAME",
    "GeneratorSettings",
    "load_config",
    "save_config",
    "load_root_config",
    "settings_from_mapping",
    "load_generator_settings",
    "save_generator_settings",
]
