"""Tests for include/exclude matching."""

import pytest

from vaultsite.config import PublishConfig
from vaultsite.publish.matcher import (
    is_excluded,
    is_included,
    normalize_path,
    select_notes,
    should_publish,
)


class TestNormalizePath:
    """Tests for normalize_path."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("notes/todo.md", "notes/todo.md"),
            ("  notes/todo.md  ", "notes/todo.md"),
            ("notes\\todo.md", "notes/todo.md"),
            ("/notes//todo.md/", "notes/todo.md"),
            (".", "."),
            ("", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str):
        """Test trimming, separators and outer slashes."""
        assert normalize_path(raw) == expected


class TestIsExcluded:
    """Tests for is_excluded."""

    def test_prefix_of_path_is_excluded(self):
        """Test that any prefix of a path excludes it."""
        path = "private/diary/2024.md"
        for prefix in ("private", "private/", "private/diary", "private/diary/2024.md"):
            assert is_excluded(path, [prefix]) is True

    def test_folder_nested_anywhere(self):
        """Test a folder pattern matching below the root."""
        assert is_excluded("projects/private/plan.md", ["private"]) is True

    def test_segment_at_end_of_path(self):
        """Test a pattern matching the last segment."""
        assert is_excluded("projects/private", ["private"]) is True

    def test_prefix_without_segment_boundary(self):
        """Test that a bare prefix also catches unrelated folders that share it."""
        assert is_excluded("private-notes/idea.md", ["private"]) is True

    def test_unrelated_path(self):
        """Test a path no pattern matches."""
        assert is_excluded("notes/todo.md", ["private", "journal"]) is False

    def test_empty_pattern_list(self):
        """Test that no patterns excludes nothing."""
        assert is_excluded("notes/todo.md", []) is False

    def test_blank_pattern_ignored(self):
        """Test that blank patterns do not exclude everything."""
        assert is_excluded("notes/todo.md", ["", "  "]) is False

    def test_pattern_normalized(self):
        """Test that patterns and paths are normalized before matching."""
        assert is_excluded("private/a.md", [" /private/ "]) is True
        assert is_excluded("private\\a.md", ["private"]) is True


class TestIsIncluded:
    """Tests for is_included."""

    @pytest.mark.parametrize("path", ["a.md", "notes/todo.md", "deep/er/path.md", ""])
    def test_empty_list_includes_everything(self, path: str):
        """Test that an empty include list publishes the whole vault."""
        assert is_included(path, []) is True

    def test_prefix_match(self):
        """Test matching by path prefix."""
        assert is_included("blog/post.md", ["blog"]) is True
        assert is_included("notes/post.md", ["blog"]) is False

    def test_any_pattern_matches(self):
        """Test that one matching pattern is enough."""
        assert is_included("notes/todo.md", ["blog", "notes"]) is True

    @pytest.mark.parametrize("pattern", ["", ".", "/"])
    def test_root_pattern_matches_everything(self, pattern: str):
        """Test that a vault-root pattern overrides the others."""
        assert is_included("anything/at/all.md", ["blog", pattern]) is True


class TestSelectNotes:
    """Tests for select_notes and should_publish."""

    def test_exclusion_wins_over_inclusion(self):
        """Test that exclusion beats a matching include pattern."""
        config = PublishConfig(include=["blog"], exclude=["blog/drafts"])
        assert should_publish("blog/post.md", config) is True
        assert should_publish("blog/drafts/wip.md", config) is False

    def test_preserves_order(self):
        """Test that selection keeps scan order."""
        config = PublishConfig(include=[], exclude=["private"])
        paths = ["z.md", "private/s.md", "a.md", "m/n.md"]
        assert select_notes(paths, config) == ["z.md", "a.md", "m/n.md"]

    def test_include_filters(self):
        """Test that only included folders are selected."""
        config = PublishConfig(include=["notes"], exclude=[])
        paths = ["notes/a.md", "other/b.md", "notes/c/d.md"]
        assert select_notes(paths, config) == ["notes/a.md", "notes/c/d.md"]

    def test_default_config_excludes_private(self):
        """Test the default exclude list."""
        paths = ["Home.md", "private/secret.md", "journal/2024.md", "site/content/x.md"]
        assert select_notes(paths, PublishConfig()) == ["Home.md"]

    def test_accepts_iterator(self):
        """Test selecting from a one-shot iterator."""
        config = PublishConfig(exclude=[])
        assert select_notes(iter(["a.md", "b.md"]), config) == ["a.md", "b.md"]
