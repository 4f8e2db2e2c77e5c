"""Tests for config persistence and settings sanitization.

Validates key mapping onto generator settings and per-root overrides.
Ensures malformed config data falls back to defaults on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mdfiletree import config
from mdfiletree.config import GeneratorSettings


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("mdfiletree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_generator_settings(), GeneratorSettings())

                config_path.write_text("[1, 2, 3]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_generator_settings(), GeneratorSettings())

    def test_settings_from_mapping_drops_invalid_values(self) -> None:
        settings = config.settings_from_mapping(
            {
                "outputFilename": "   ",
                "ignore": ["tmp", 3, "", "node_modules"],
                "excludeVcs": "no",
                "groupSeparator": False,
                "linkStyle": "fancy",
            }
        )

        self.assertEqual(settings.output_filename, "list.md")
        self.assertEqual(settings.ignore, ("tmp", "node_modules"))
        self.assertTrue(settings.exclude_structural)
        self.assertFalse(settings.group_separator)
        self.assertEqual(settings.link_style, "path")

    def test_ignore_tokens_are_kept_verbatim(self) -> None:
        settings = config.settings_from_mapping({"ignore": [" tmp", "build "]})
        self.assertEqual(settings.ignore, (" tmp", "build "))

    def test_ignore_must_be_a_list(self) -> None:
        settings = config.settings_from_mapping({"ignore": "tmp"})
        self.assertEqual(settings.ignore, ())

    def test_save_and_load_generator_settings_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            expected = GeneratorSettings(
                output_filename="files.md",
                ignore=("dist",),
                exclude_structural=False,
                group_separator=False,
                link_style="nested",
            )
            with mock.patch("mdfiletree.config.CONFIG_PATH", config_path):
                config.save_generator_settings(expected)
                self.assertEqual(config.load_generator_settings(), expected)

            saved = json.loads(config_path.read_text(encoding="utf-8"))
            self.assertEqual(saved["ignore"], ["dist"])
            self.assertEqual(saved["outputFilename"], "files.md")

    def test_root_override_wins_over_user_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            root = Path(tmp) / "project"
            root.mkdir()
            config_path.write_text(json.dumps({"outputFilename": "user.md", "ignore": ["tmp"]}), encoding="utf-8")
            (root / config.ROOT_CONFIG_FILENAME).write_text(json.dumps({"outputFilename": "root.md"}), encoding="utf-8")

            with mock.patch("mdfiletree.config.CONFIG_PATH", config_path):
                settings = config.load_generator_settings(root)

            self.assertEqual(settings.output_filename, "root.md")
            self.assertEqual(settings.ignore, ("tmp",))

    def test_save_config_ignores_unwritable_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("mdfiletree.config.CONFIG_PATH", blocker / "config.json"):
                config.save_config({"ignore": []})
            self.assertTrue(blocker.is_file())


if __name__ == "__main__":
    unittest.main()
