from __future__ import annotations

"""
Path Relationship Predicates.

Segment-aware helpers used to decide whether one path lives below another.
Prefix checks always require the separator right after the parent, so
'/my/path' is never treated as a parent of '/my/pathological'.
"""

from typing import Any, List, Optional, Sequence

from wixtree.domain.constants import PATH_SEPARATOR
from wixtree.domain.errors import InvalidPathRelationship

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_child(parent: Any, candidate: Any, sep: Optional[str] = None) -> bool:
    """
    Check whether *candidate* is a descendant of *parent*.

    Direct and indirect descendants both match:

        /my/path -> /my/path/child            True
        /my/path -> /my/path/child/indirect   True
        /my/path -> /my/otherpath             False

    Args:
        parent: Possible ancestor path.
        candidate: Possible descendant path.
        sep: Segment separator. Defaults to the process-wide separator.

    Returns:
        bool: True if *candidate* starts with *parent* plus a separator.
    """
    if not isinstance(parent, str) or not isinstance(candidate, str):
        return False
    sep = sep or PATH_SEPARATOR
    return candidate != parent and candidate.startswith(f"{parent}{sep}")


def is_direct_child(parent: Any, candidate: Any, sep: Optional[str] = None) -> bool:
    """
    Check whether *candidate* sits exactly one level below *parent*.

        /my/path -> /my/path/child            True
        /my/path -> /my/path/child/indirect   False

    Segment counts are compared rather than string lengths since segment
    names vary in length.
    """
    sep = sep or PATH_SEPARATOR
    if not is_child(parent, candidate, sep):
        return False
    return len(split_segments(candidate, sep)) == len(split_segments(parent, sep)) + 1


def require_child(parent: str, candidate: str, sep: Optional[str] = None) -> None:
    """Raise InvalidPathRelationship unless *candidate* descends from *parent*."""
    if not is_child(parent, candidate, sep):
        raise InvalidPathRelationship(parent, candidate)


def split_segments(path: str, sep: Optional[str] = None) -> List[str]:
    return path.split(sep or PATH_SEPARATOR)


def join_segments(segments: Sequence[str], sep: Optional[str] = None) -> str:
    return (sep or PATH_SEPARATOR).join(segments)


def basename(path: str, sep: Optional[str] = None) -> str:
    """Return the final segment of *path* (ignoring a trailing separator)."""
    sep = sep or PATH_SEPARATOR
    trimmed = path.rstrip(sep) if path != sep else path
    return trimmed.rsplit(sep, 1)[-1]


def relative_segments(root: str, path: str, sep: Optional[str] = None) -> List[str]:
    """
    Return the segments of *path* below *root*.

    Args:
        root: Ancestor path.
        path: Descendant path.
        sep: Segment separator.

    Returns:
        List[str]: Segments after *root*, or an empty list if *path* is
                   not below *root*.
    """
    sep = sep or PATH_SEPARATOR
    if not is_child(root, path, sep):
        return []
    return split_segments(path[len(root) + len(sep):], sep)
