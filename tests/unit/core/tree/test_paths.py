from __future__ import annotations

"""
Unit tests for the Path Relationship Predicates.

Verifies boundary-aware prefix matching and direct/indirect distinction.
"""

import pytest

from wixtree.core.tree.paths import (
    basename,
    is_child,
    is_direct_child,
    join_segments,
    relative_segments,
    require_child,
    split_segments,
)
from wixtree.domain.constants import PATH_SEPARATOR as SEP
from wixtree.domain.errors import InvalidPathRelationship


@pytest.mark.parametrize("a", ["a", "/my/path", "C:\\app", "", "x y"])
def test_is_child_boundaries(a):
    """A path is never its own child and needs a separator boundary."""
    assert is_child(a, a) is False
    assert is_child(a, a + SEP + "x") is True
    assert is_child(a, a + "x") is False


@pytest.mark.parametrize("a", ["a", "/my/path", "long segment name"])
def test_direct_vs_indirect(a):
    direct = a + SEP + "x"
    indirect = a + SEP + "x" + SEP + "y"

    assert is_direct_child(a, direct) is True
    assert is_direct_child(a, indirect) is False
    assert is_child(a, indirect) is True


def test_shared_prefix_is_not_related():
    assert is_child("/my/path", "/my/pathological", sep="/") is False
    assert is_child("/my/pat", "/my/path", sep="/") is False
    assert is_direct_child("/my/path", "/my/pathological/x", sep="/") is False


def test_segment_count_not_character_count():
    assert is_direct_child("/r", "/r/a-very-long-directory-name", sep="/") is True
    assert is_direct_child("/root-dir", "/root-dir/a/b", sep="/") is False


def test_explicit_separator_overrides_default():
    assert is_child("app", "app\\res", sep="\\") is True
    assert is_child("app", "app/res", sep="\\") is False


def test_non_string_input_never_matches():
    assert is_child(None, "a/b") is False
    assert is_child("a", 42) is False
    assert is_direct_child(["a"], "a/b") is False


def test_require_child_raises_on_unrelated_paths():
    require_child("a", "a" + SEP + "b")
    with pytest.raises(InvalidPathRelationship) as exc:
        require_child("a", "ab")
    assert exc.value.parent == "a"
    assert exc.value.candidate == "ab"


def test_segment_helpers():
    assert split_segments("a/b/c", sep="/") == ["a", "b", "c"]
    assert join_segments(["a", "b"], sep="\\") == "a\\b"
    assert basename("slack\\resources", sep="\\") == "resources"
    assert basename("/opt/app/", sep="/") == "app"
    assert basename("app", sep="/") == "app"


def test_relative_segments():
    assert relative_segments("a", "a/b/c/file.txt", sep="/") == ["b", "c", "file.txt"]
    assert relative_segments("/opt/app", "/opt/app/x", sep="/") == ["x"]
    assert relative_segments("a", "b/file.txt", sep="/") == []
    assert relative_segments("a", "a", sep="/") == []
