from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the wixtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wixtree",
        description="Build the installer directory tree for a packaged application.",
    )

    # --- Manifests ---
    p.add_argument("--dirs", dest="dirs_file", default=None,
                   help="Text file listing every directory, one per line.")
    p.add_argument("--files", dest="files_file", default=None,
                   help="Text file listing every file, one per line.")

    # --- Tree Layout ---
    p.add_argument("--root", dest="root", default=None,
                   help="Root directory of the packaged application.")
    p.add_argument("--version", dest="version", default=None,
                   help="Application version used for the 'app-<version>' folder.")

    # --- Installer Records ---
    p.add_argument("--exe", dest="executable_name", default=None,
                   help="Executable name (without '.exe') of the root launcher.")
    p.add_argument("--stub", dest="stub_executable_path", default=None,
                   help="Source path of the stub launcher.")
    p.add_argument("--auto-update", action="store_true",
                   help="Ship the updater binary at the installation root.")
    p.add_argument("--updater", dest="updater_path", default=None,
                   help="Source path of the updater binary.")
    p.add_argument("--strict", action="store_true",
                   help="Fail on duplicated file entries instead of skipping them.")

    # --- Configuration and Diagnostics ---
    p.add_argument("--config", dest="config_path", default=None,
                   help="JSON configuration file (default: ./wixtree.json).")
    p.add_argument("--use-defaults", action="store_true",
                   help="Ignore the configuration file.")
    p.add_argument("--dump-config", action="store_true",
                   help="Print the effective configuration and exit.")
    p.add_argument("--log-file", dest="log_file", default=None,
                   help="Also write logs to this file.")
    p.add_argument("--debug", action="store_true",
                   help="Elevate logging verbosity to DEBUG.")

    # --- Format Selection ---
    p.add_argument("--json", dest="json_output", action="store_true",
                   help="Print the merged tree as JSON.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags left unset map to None so they do not mask stored values.
    """
    overrides: Dict[str, Any] = {
        "dirs_file": args.dirs_file,
        "files_file": args.files_file,
        "root": args.root,
        "version": args.version,
        "executable_name": args.executable_name,
        "stub_executable_path": args.stub_executable_path,
        "updater_path": args.updater_path,
    }

    if args.auto_update:
        overrides["auto_update"] = True
    if args.strict:
        overrides["strict"] = True

    return overrides
