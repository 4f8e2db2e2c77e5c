"""Tests for path inclusion rules and path-string helpers."""

from __future__ import annotations

import unittest

from mdfiletree.filtering import VCS_METADATA_DIRS, PathFilter
from mdfiletree.paths import normalize_separators, relative_to_root, top_level_segment


class PathFilterTests(unittest.TestCase):
    def test_ignore_token_matches_anywhere_in_path(self) -> None:
        path_filter = PathFilter(ignore=("tmp",))

        self.assertFalse(path_filter.included("a/tmp/x.md"))
        self.assertFalse(path_filter.included("tmpdir/x.md"))
        self.assertFalse(path_filter.included("a/notes.tmp"))
        self.assertTrue(path_filter.included("a/x.md"))

    def test_empty_ignore_token_does_not_exclude_everything(self) -> None:
        path_filter = PathFilter(ignore=("",))
        self.assertTrue(path_filter.included("a/x.md"))

    def test_root_level_files_are_dropped_when_directory_required(self) -> None:
        self.assertFalse(PathFilter().included("README.md"))
        self.assertTrue(PathFilter(require_directory=False).included("README.md"))

    def test_structural_excludes_match_directory_segments_exactly(self) -> None:
        path_filter = PathFilter(structural_excludes=VCS_METADATA_DIRS)

        self.assertFalse(path_filter.included(".git/config"))
        self.assertFalse(path_filter.included("vendor/lib/.hg/store"))
        self.assertTrue(path_filter.included("docs/.gitignore"))
        self.assertTrue(path_filter.included("my.git/notes.md"))

    def test_included_is_independent_of_call_order(self) -> None:
        path_filter = PathFilter(ignore=("build",))
        paths = ["a/x.md", "build/out.md", "README.md", "b/build.md", "c/y.md"]

        forward = [path_filter.included(path) for path in paths]
        backward = [path_filter.included(path) for path in reversed(paths)]

        self.assertEqual(forward, list(reversed(backward)))
        self.assertEqual(path_filter.apply(paths), ["a/x.md", "c/y.md"])


class PathHelperTests(unittest.TestCase):
    def test_normalize_separators_turns_backslashes_into_slashes(self) -> None:
        self.assertEqual(normalize_separators("C:\\work\\a\\x.md"), "C:/work/a/x.md")

    def test_relative_to_root_strips_prefix(self) -> None:
        self.assertEqual(relative_to_root("/work/a/x.md", "/work"), "a/x.md")
        self.assertEqual(relative_to_root("/work/a/x.md", "/work/"), "a/x.md")
        self.assertEqual(relative_to_root("C:\\work\\a\\x.md", "C:\\work"), "a/x.md")

    def test_relative_to_root_leaves_foreign_paths_alone(self) -> None:
        self.assertEqual(relative_to_root("/elsewhere/x.md", "/work"), "/elsewhere/x.md")
        self.assertEqual(relative_to_root("/workshop/x.md", "/work"), "/workshop/x.md")

    def test_top_level_segment(self) -> None:
        self.assertEqual(top_level_segment("a/b/c.md"), "a")
        self.assertEqual(top_level_segment("README.md"), "README.md")


if __name__ == "__main__":
    unittest.main()
