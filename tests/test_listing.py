"""Tests for directory synthesis over flat keys (no backend involved)."""

from __future__ import annotations

import pytest

from bucketfs.errors import NotFound
from bucketfs.interfaces import DirEntry
from bucketfs.listing import KeyKind, classify, synthesize_entries


class TestClassify:
    def test_exact_match_is_a_file(self):
        assert classify("dir", "dir") == (KeyKind.EXACT, "")

    def test_direct_child(self):
        assert classify("dir", "dir/a.txt") == (KeyKind.CHILD, "a.txt")

    def test_nested_descendant(self):
        assert classify("dir", "dir/sub/c.txt") == (KeyKind.DESCENDANT, "sub/c.txt")

    def test_sibling_with_shared_string_prefix_is_outside(self):
        assert classify("dir", "dir2/x.txt")[0] is KeyKind.OUTSIDE
        assert classify("dir", "dirx.txt")[0] is KeyKind.OUTSIDE

    def test_placeholder_marker(self):
        assert classify("dir", "dir/") == (KeyKind.MARKER, "")

    def test_empty_prefix_is_the_root(self):
        assert classify("", "a.txt") == (KeyKind.CHILD, "a.txt")
        assert classify("", "dir/a.txt") == (KeyKind.DESCENDANT, "dir/a.txt")


class TestSynthesizeEntries:
    def test_lists_only_immediate_children_sorted(self):
        keys = ["dir/b.txt", "dir/sub/c.txt", "dir/a.txt"]
        assert synthesize_entries("dir", keys) == [DirEntry("a.txt"), DirEntry("b.txt")]

    def test_entries_are_never_directories(self):
        entries = synthesize_entries("dir", ["dir/a", "dir/a/b.txt"])
        assert [e.name for e in entries] == ["a"]
        assert all(not e.is_dir for e in entries)

    def test_intermediate_only_directory_lists_empty(self):
        assert synthesize_entries("dir", ["dir/sub/deeper/c.txt", "dir/sub/d.txt"]) == []

    def test_no_keys_is_not_found(self):
        with pytest.raises(NotFound):
            synthesize_entries("missing", [])

    def test_exact_match_is_not_found_even_with_nested_keys(self):
        with pytest.raises(NotFound):
            synthesize_entries("dir", ["dir/a.txt", "dir"])

    def test_only_sibling_keys_is_not_found(self):
        with pytest.raises(NotFound):
            synthesize_entries("dir", ["dir2/a.txt", "dir.bak"])

    def test_siblings_do_not_leak_into_listing(self):
        entries = synthesize_entries("dir", ["dir/a.txt", "dirx.txt", "dir2/b.txt"])
        assert entries == [DirEntry("a.txt")]

    def test_placeholder_marker_makes_directory_exist(self):
        assert synthesize_entries("dir", ["dir/"]) == []

    def test_duplicates_collapse(self):
        assert synthesize_entries("d", ["d/x", "d/x", "d/y"]) == [DirEntry("x"), DirEntry("y")]

    def test_byte_order_sort(self):
        entries = synthesize_entries("d", ["d/b", "d/B", "d/a", "d/_", "d/é"])
        assert [e.name for e in entries] == ["B", "_", "a", "b", "é"]

    def test_root_listing(self):
        entries = synthesize_entries("", ["top.txt", "dir/a.txt"])
        assert entries == [DirEntry("top.txt")]

    def test_not_found_names_the_logical_path(self):
        with pytest.raises(NotFound) as exc_info:
            synthesize_entries("tenant/missing", [], path="missing")
        assert exc_info.value.path == "missing"

    def test_accepts_any_iterable(self):
        keys = iter(["dir/a.txt"])
        assert synthesize_entries("dir", keys) == [DirEntry("a.txt")]
