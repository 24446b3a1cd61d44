from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, merges stored configuration with command-line
overrides, runs the tree pipeline and prints the resulting tree.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from wixtree.core.pipeline import prepare_tree
from wixtree.core.tree.render import tree_to_dict
from wixtree.core.validator import validate_config
from wixtree.domain.config import get_default_config, load_config
from wixtree.domain.pipeline_models import TreeResult
from wixtree.infra.logging import LoggingConfig, configure_logging, get_logger
from wixtree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on failure, 2 if an input list is missing.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    for key in ("dirs_file", "files_file"):
        list_path = clean_conf.get(key, "")
        if list_path and not os.path.exists(list_path):
            msg = f"Input list does not exist: {list_path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2

    try:
        result = prepare_tree(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        msg = f"Tree preparation crashed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if args.json_output and result.ok:
        print(json.dumps(tree_to_dict(result.tree), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides for known keys."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: TreeResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print("\n".join(result.lines))
    print()
    print(f"Root: {result.root} (version {result.version})")
    print(f"Directory nodes: {result.summary.get('nodes', 0)}")
    print(f"Placed files: {result.summary.get('placed_files', 0)}")


if __name__ == "__main__":
    sys.exit(main())
