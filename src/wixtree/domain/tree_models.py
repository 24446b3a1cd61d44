from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the record types used to describe an installer directory tree:
immutable file and registry records, and the mutable TreeNode that owns
them together with its child directories.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

# -----------------------------------------------------------------------------
# LEAF RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileRecord:
    """
    A file placed inside a directory node.

    Attributes:
        name: Basename the file is installed under.
        path: Full source path of the file.
    """
    name: str
    path: str


@dataclass(frozen=True)
class RegistryRecord:
    """
    A registry value written on install and tracked for uninstall cleanup.
    """
    id: str
    root: str
    name: str
    key: str
    type: str
    value: str


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TreeNode:
    """
    A directory in the installer tree.

    Attributes:
        path: Full original path this node represents.
        name: Directory name (last path segment, or the version label).
        files: Files in packaging order.
        registry_entries: Registry values owned by this directory.
        children: Child directories keyed by their name.
    """
    path: str
    name: str
    files: List[FileRecord] = field(default_factory=list)
    registry_entries: List[RegistryRecord] = field(default_factory=list)
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def get_child(self, name: str) -> Optional["TreeNode"]:
        return self.children.get(name)

    def add_child(self, node: "TreeNode") -> "TreeNode":
        """Attach *node* under its own name and return it."""
        self.children[node.name] = node
        return node

    def add_file(self, record: FileRecord) -> None:
        self.files.append(record)

    def add_registry_entry(self, record: RegistryRecord) -> None:
        self.registry_entries.append(record)

    def has_file(self, path: str) -> bool:
        return any(f.path == path for f in self.files)

    def clone(self) -> "TreeNode":
        """
        Return a structurally independent copy of this subtree.

        Nodes and their owned lists are rebuilt; the frozen records are
        shared since they cannot change.
        """
        return TreeNode(
            path=self.path,
            name=self.name,
            files=list(self.files),
            registry_entries=list(self.registry_entries),
            children={key: child.clone() for key, child in self.children.items()},
        )

    def walk(self, depth: int = 0) -> Iterator[Tuple["TreeNode", int]]:
        """Yield ``(node, depth)`` pairs in pre-order."""
        yield self, depth
        for child in self.children.values():
            yield from child.walk(depth + 1)

    def find(self, *names: str) -> Optional["TreeNode"]:
        """Follow a chain of child names, returning None if any is missing."""
        node: Optional[TreeNode] = self
        for name in names:
            if node is None:
                return None
            node = node.get_child(name)
        return node
