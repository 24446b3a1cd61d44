from __future__ import annotations

"""
Directory Tree Builder.

Turns a flat, ordered list of directory paths into a nested TreeNode
hierarchy. Optionally wraps the payload in a version-qualified node so an
unversioned launcher can later sit next to the versioned application.

    paths = [
        'slack/resources',
        'slack/resources/app.asar.unpacked',
        'slack/locales',
    ]

    build_tree(paths, 'slack')
    slack
    ├── resources
    │   └── app.asar.unpacked
    └── locales
"""

import logging
from typing import List, Optional, Sequence

from wixtree.core.tree.paths import basename, is_child, is_direct_child
from wixtree.domain.constants import version_node_name
from wixtree.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        paths: Sequence[str],
        root: str,
        version_label: Optional[str] = None,
        *,
        sep: Optional[str] = None,
) -> TreeNode:
    """
    Build the directory tree rooted at *root* from a list of paths.

    Paths that are not below *root* are ignored, as is *root* itself.
    Duplicated paths produce a single node.

    Args:
        paths: Directory paths in packaging order.
        root: Path of the tree root.
        version_label: If given, all children are attached under an
                       'app-<version_label>' node sharing the root's path.
        sep: Segment separator. Defaults to the process-wide separator.

    Returns:
        TreeNode: The root node.
    """
    logger.debug(f"Building directory tree for root '{root}' from {len(paths)} paths")

    output = TreeNode(path=root, name=basename(root, sep))

    entry_point = output
    if version_label:
        entry_point = output.add_child(
            TreeNode(path=root, name=version_node_name(version_label))
        )

    descendants: List[str] = [p for p in paths if is_child(root, p, sep)]
    direct_children: List[str] = [p for p in descendants if is_direct_child(root, p, sep)]

    for direct_child in direct_children:
        name = basename(direct_child, sep)
        if name in entry_point.children:
            continue
        entry_point.add_child(_build_subtree(descendants, direct_child, name, sep))

    return output


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_subtree(
        paths: List[str],
        root: str,
        name: str,
        sep: Optional[str],
) -> TreeNode:
    """Recursive step of build_tree for an unversioned directory."""
    node = TreeNode(path=root, name=name)

    descendants = [p for p in paths if is_child(root, p, sep)]
    for candidate in descendants:
        if not is_direct_child(root, candidate, sep):
            continue
        child_name = basename(candidate, sep)
        if child_name not in node.children:
            node.add_child(_build_subtree(descendants, candidate, child_name, sep))

    return node
