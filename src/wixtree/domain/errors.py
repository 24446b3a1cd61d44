from __future__ import annotations

"""
Tree Domain Exceptions.

Structural and contract errors raised while building a directory tree or
merging a file manifest into it. None of them are transient: callers are
expected to surface them immediately.
"""

# -----------------------------------------------------------------------------
# BASE ERROR
# -----------------------------------------------------------------------------

class TreeError(Exception):
    """Base class for every error raised by the tree subsystem."""


# -----------------------------------------------------------------------------
# STRUCTURAL ERRORS
# -----------------------------------------------------------------------------

class InvalidPathRelationship(TreeError):
    """
    Raised by strict helpers when two paths are not in the expected
    parent/child relationship.

    Attributes:
        parent: The expected ancestor path.
        candidate: The path that failed the check.
    """

    def __init__(self, parent: str, candidate: str) -> None:
        self.parent = parent
        self.candidate = candidate
        super().__init__(f"'{candidate}' is not a descendant of '{parent}'")


class MissingDirectoryNode(TreeError):
    """
    Raised when a file path walks into a directory that the tree does not
    contain.

    Attributes:
        path: Full path of the file that could not be placed.
        segment: Path segment at which resolution failed.
    """

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"Cannot place '{path}': no directory node for segment '{segment}'"
        )


class DuplicateFileEntry(TreeError):
    """
    Raised in strict mode when a file is recorded twice at the same node.

    Attributes:
        path: Source path of the duplicated file.
        node_path: Path of the node that already holds the record.
    """

    def __init__(self, path: str, node_path: str) -> None:
        self.path = path
        self.node_path = node_path
        super().__init__(f"File '{path}' already recorded under '{node_path}'")
