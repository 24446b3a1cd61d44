from __future__ import annotations

"""
Tree Pipeline.

Runs a complete tree preparation from a configuration dictionary: reads
the directory and file manifests, builds the versioned directory tree,
merges the files and installer records, and renders the result.
"""

import logging
from typing import Any, Dict, Optional

from wixtree.core.tree.builder import build_tree
from wixtree.core.tree.merger import VersionInfoFactory, merge_manifest
from wixtree.core.tree.render import count_files, count_nodes, render_tree
from wixtree.core.validator import missing_required, validate_config
from wixtree.domain.errors import TreeError
from wixtree.domain.pipeline_models import (
    TreeResult,
    create_error_result,
    create_success_result,
)
from wixtree.infra.fs import read_path_list

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def prepare_tree(
        config: Dict[str, Any],
        *,
        version_info_factory: Optional[VersionInfoFactory] = None,
) -> TreeResult:
    """
    Execute the build and merge steps described by *config*.

    Structural failures (invalid manifests, unreadable lists) are reported
    through a failed TreeResult. Any other exception propagates.

    Args:
        config: Raw configuration dictionary.
        version_info_factory: Override for the install info generator.

    Returns:
        TreeResult: Outcome of the run.
    """
    cfg, warnings = validate_config(config)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    missing = missing_required(cfg)
    if missing:
        msg = f"Missing required settings: {', '.join(missing)}"
        logger.error(msg)
        return create_error_result(msg, cfg)

    # 1. Manifest acquisition
    try:
        dirs = read_path_list(cfg["dirs_file"])
        files = read_path_list(cfg["files_file"])
    except OSError as e:
        msg = f"Cannot read path list: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg)

    # 2. Build and merge
    try:
        tree = build_tree(dirs, cfg["root"], cfg["version"])
        merged = merge_manifest(
            tree,
            files,
            cfg["executable_name"],
            cfg["stub_executable_path"],
            cfg["auto_update"],
            cfg["version"],
            version_info_factory=version_info_factory,
            updater_path=cfg["updater_path"] or None,
            strict=cfg["strict"],
        )
    except TreeError as e:
        logger.error(f"Tree preparation failed: {e}")
        return create_error_result(
            str(e), cfg, summary_extra={"error_type": type(e).__name__}
        )

    # 3. Rendering
    lines = render_tree(merged)
    summary = {
        "ok": True,
        "directories": len(dirs),
        "files": len(files),
        "nodes": count_nodes(merged),
        "placed_files": count_files(merged),
        "auto_update": cfg["auto_update"],
    }
    logger.info(f"Tree ready: {summary['nodes']} nodes, {summary['placed_files']} files")

    return create_success_result(cfg, merged, lines, summary)
