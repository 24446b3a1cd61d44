from __future__ import annotations

"""
Global Domain Constants.

Names and fixed values shared by the tree builder, the manifest merger
and the interface layers.
"""

import os

# -----------------------------------------------------------------------------
# PATH HANDLING
# -----------------------------------------------------------------------------

# Process-wide segment separator used by every path predicate
PATH_SEPARATOR: str = "\\" if os.name == "nt" else "/"

# -----------------------------------------------------------------------------
# INSTALLER LAYOUT
# -----------------------------------------------------------------------------

VERSION_NODE_PREFIX: str = "app-"
STUB_EXECUTABLE_SUFFIX: str = ".exe"
INSTALL_INFO_FILE_NAME: str = ".installInfo.json"
UPDATER_FILE_NAME: str = "Update.exe"
UPDATER_VENDOR_BINARY: str = "MsiAwareSquirrel_1.9.1.exe"

# Registry value recording the install root so uninstall can purge it
INSTALL_PATH_REGISTRY = {
    "id": "RegistryInstallPath",
    "root": "HKLM",
    "name": "InstallPath",
    "key": "SOFTWARE\\{{Manufacturer}}\\{{ApplicationName}}",
    "type": "string",
    "value": "[APPLICATIONROOTDIRECTORY]",
}


def version_node_name(version_label: str) -> str:
    """Return the child key of the version-qualified entry point node."""
    return f"{VERSION_NODE_PREFIX}{version_label}"
