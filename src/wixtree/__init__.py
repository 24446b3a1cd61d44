from __future__ import annotations

"""
wixtree: installer directory trees from flat path manifests.
"""

from wixtree.core.tree.builder import build_tree
from wixtree.core.tree.merger import merge_manifest
from wixtree.core.tree.paths import is_child, is_direct_child
from wixtree.domain.errors import (
    DuplicateFileEntry,
    InvalidPathRelationship,
    MissingDirectoryNode,
    TreeError,
)
from wixtree.domain.tree_models import FileRecord, RegistryRecord, TreeNode

__version__ = "0.1.0"

__all__ = [
    "build_tree",
    "merge_manifest",
    "is_child",
    "is_direct_child",
    "TreeNode",
    "FileRecord",
    "RegistryRecord",
    "TreeError",
    "InvalidPathRelationship",
    "MissingDirectoryNode",
    "DuplicateFileEntry",
]
