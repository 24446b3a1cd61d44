from __future__ import annotations

"""
Pipeline Domain Data Models.

Result object passed from the tree pipeline to the interface layer, with
factories for the success and failure cases.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wixtree.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of a complete build + merge run.

    Attributes:
        ok: Whether the run succeeded.
        error: Failure description, empty on success.
        root: Root path the tree was built for.
        version: Version label of the entry point.
        tree: Merged tree, None on failure.
        lines: Rendered tree lines.
        summary: Counters and settings of the run.
    """
    ok: bool
    error: str

    root: str
    version: str

    tree: Optional[TreeNode] = None
    lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        cfg: Dict[str, Any],
        tree: TreeNode,
        lines: List[str],
        summary: Dict[str, Any],
) -> TreeResult:
    return TreeResult(
        ok=True,
        error="",
        root=cfg.get("root", ""),
        version=cfg.get("version", ""),
        tree=tree,
        lines=list(lines),
        summary=dict(summary),
    )


def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> TreeResult:
    """
    Create a failed result.

    Args:
        error: Failure description.
        cfg: Configuration used for the failed run.
        summary_extra: Additional diagnostic fields.
    """
    summary: Dict[str, Any] = {"ok": False}
    if summary_extra:
        summary.update(summary_extra)
    return TreeResult(
        ok=False,
        error=error,
        root=cfg.get("root", ""),
        version=cfg.get("version", ""),
        summary=summary,
    )
