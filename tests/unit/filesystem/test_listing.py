"""Unit tests for directory listing.

Tests default listing, recursion, depth limits, glob filters, symlink
handling, ordering, and error cases.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from coco.core.errors import PathNotFoundError, TargetNotDirectoryError
from coco.filesystem.listing import list_path
from coco.filesystem.models import Depth, GlobPattern, Recursive


def _names(root: Path, entries: list[Path]) -> list[str]:
    return [entry.relative_to(root).as_posix() for entry in entries]


class TestListPathDefaults:
    """Tests for listing without options."""

    def test_lists_immediate_children_only(self, sample_tree: Path) -> None:
        """Only direct children are listed, none of their descendants."""
        entries = list(list_path(sample_tree))

        assert _names(sample_tree, entries) == ["a.txt", "b.rs", "sub"]

    def test_entries_are_joined_to_target(self, sample_tree: Path) -> None:
        """Each entry is the target path joined with the entry name."""
        entries = list(list_path(sample_tree))

        assert entries[0] == sample_tree / "a.txt"

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory yields nothing."""
        empty = tmp_path / "empty"
        empty.mkdir()

        assert list(list_path(empty)) == []

    def test_unsorted_uses_directory_order(self, sample_tree: Path) -> None:
        """With sorting off, the same entries come back in any order."""
        entries = list(list_path(sample_tree, sort_entries=False))

        assert sorted(_names(sample_tree, entries)) == ["a.txt", "b.rs", "sub"]


class TestListPathRecursion:
    """Tests for --recursive and --depth."""

    def test_recursive_is_unbounded(self, sample_tree: Path) -> None:
        """Recursive listing reaches every level, parents before children."""
        entries = list(list_path(sample_tree, [Recursive()]))

        assert _names(sample_tree, entries) == [
            "a.txt",
            "b.rs",
            "sub",
            "sub/c.txt",
            "sub/deep",
            "sub/deep/d.rs",
        ]

    def test_depth_zero_matches_default(self, sample_tree: Path) -> None:
        """Depth(0) lists the same entries as no recursion option."""
        assert list(list_path(sample_tree, [Depth(0)])) == list(list_path(sample_tree))

    def test_depth_one(self, sample_tree: Path) -> None:
        """Depth(1) descends one level below the target."""
        entries = list(list_path(sample_tree, [Depth(1)]))

        assert _names(sample_tree, entries) == ["a.txt", "b.rs", "sub", "sub/c.txt", "sub/deep"]

    def test_depth_bounds_recursive(self, sample_tree: Path) -> None:
        """Depth bounds the walk even when Recursive is also given."""
        with_recursive = list(list_path(sample_tree, [Recursive(), Depth(1)]))
        depth_only = list(list_path(sample_tree, [Depth(1)]))

        assert with_recursive == depth_only

    def test_last_depth_wins(self, sample_tree: Path) -> None:
        """When Depth is repeated, the last value applies."""
        entries = list(list_path(sample_tree, [Depth(5), Depth(0)]))

        assert _names(sample_tree, entries) == ["a.txt", "b.rs", "sub"]

    def test_symlinked_directory_not_followed(self, tmp_path: Path) -> None:
        """A symlink to a directory is listed but not descended into."""
        root = tmp_path / "root"
        root.mkdir()
        (root / "loop").symlink_to(root, target_is_directory=True)

        entries = list(list_path(root, [Recursive()]))

        assert _names(root, entries) == ["loop"]


class TestListPathGlob:
    """Tests for --glob filtering."""

    def test_glob_filters_entries(self, tmp_path: Path) -> None:
        """Only entries matching the pattern are listed."""
        root = tmp_path / "c"
        root.mkdir()
        (root / "m.txt").write_text("m")
        (root / "n.rs").write_text("n")

        entries = list(list_path(root, [GlobPattern("*.rs")]))

        assert entries == [root / "n.rs"]

    def test_glob_with_recursion_searches_non_matching_dirs(self, sample_tree: Path) -> None:
        """Recursion descends into directories that do not match the pattern."""
        entries = list(list_path(sample_tree, [Recursive(), GlobPattern("*.rs")]))

        assert _names(sample_tree, entries) == ["b.rs", "sub/deep/d.rs"]

    def test_multiple_globs_are_a_union(self, sample_tree: Path) -> None:
        """An entry matching any of several patterns is listed."""
        entries = list(list_path(sample_tree, [GlobPattern("*.rs"), GlobPattern("a.*")]))

        assert _names(sample_tree, entries) == ["a.txt", "b.rs"]

    def test_question_mark_matches_one_character(self, sample_tree: Path) -> None:
        """? matches exactly one character."""
        entries = list(list_path(sample_tree, [GlobPattern("?.rs")]))

        assert _names(sample_tree, entries) == ["b.rs"]


class TestListPathErrors:
    """Tests for invalid listing targets."""

    def test_missing_path(self, tmp_path: Path) -> None:
        """Listing a nonexistent path raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError, match="Could not find"):
            list_path(tmp_path / "missing")

    def test_file_path(self, sample_tree: Path) -> None:
        """Listing a file raises TargetNotDirectoryError."""
        with pytest.raises(TargetNotDirectoryError, match="is not a directory"):
            list_path(sample_tree / "a.txt")

    def test_nested_read_error_propagates(self, sample_tree: Path) -> None:
        """An unreadable subdirectory aborts the walk."""
        original_iterdir = Path.iterdir

        def failing_iterdir(self: Path):  # type: ignore[no-untyped-def]
            if self.name == "sub":
                raise PermissionError("Permission denied")
            return original_iterdir(self)

        with (
            patch.object(Path, "iterdir", failing_iterdir),
            pytest.raises(PermissionError),
        ):
            list(list_path(sample_tree, [Recursive()]))
