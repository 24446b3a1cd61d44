from __future__ import annotations

"""
Tree Renderer.

Converts TreeNode hierarchies into visual ASCII lines for diagnostics and
into plain dictionaries for JSON export to the descriptor generator.
"""

from dataclasses import asdict
from typing import Any, Dict, List

from wixtree.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(node: TreeNode) -> List[str]:
    """
    Render *node* and its subtree as a list of text lines.

    Each directory lists its registry entries, then its files, then its
    subdirectories, using standard ASCII connectors (├──, └──).

    Args:
        node: Root of the subtree to render.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [f"{node.name}/"]
    _render_children(node, lines, prefix="")
    return lines


def tree_to_dict(node: TreeNode) -> Dict[str, Any]:
    """Convert *node* into nested plain dicts and lists."""
    return {
        "path": node.path,
        "name": node.name,
        "files": [asdict(f) for f in node.files],
        "registry_entries": [asdict(r) for r in node.registry_entries],
        "children": {key: tree_to_dict(child) for key, child in node.children.items()},
    }


def count_nodes(node: TreeNode) -> int:
    return sum(1 for _ in node.walk())


def count_files(node: TreeNode) -> int:
    return sum(len(n.files) for n, _ in node.walk())


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_children(node: TreeNode, lines: List[str], prefix: str) -> None:
    """Recursively append the entries below *node* to *lines*."""
    entries: List[Any] = []
    entries.extend(("reg", r) for r in node.registry_entries)
    entries.extend(("file", f) for f in node.files)
    entries.extend(("dir", c) for c in node.children.values())

    total = len(entries)
    for i, (kind, item) in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if kind == "reg":
            lines.append(f"{prefix}{connector}[reg] {item.root}\\{item.key}\\{item.name}")
        elif kind == "file":
            lines.append(f"{prefix}{connector}{item.name}")
        else:
            lines.append(f"{prefix}{connector}{item.name}/")
            _render_children(item, lines, prefix + ("    " if is_last else "│   "))
