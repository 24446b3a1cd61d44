from __future__ import annotations

"""
Installation Info Generator.

Writes the '.installInfo.json' descriptor that the installed application
reads to verify which version it was installed as. The file lives under a
deterministic temporary location so that repeated builds of the same
version resolve to the same source path.
"""

import json
import logging
import os
import re
import tempfile
from typing import Dict, Optional

from wixtree.domain.constants import INSTALL_INFO_FILE_NAME

logger = logging.getLogger(__name__)

# Semver core plus an optional pre-release/build tail
_SEMVER_RX = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:[-+](.*))?$")
_TAIL_NUMBER_RX = re.compile(r"(\d+)(?!.*\d)")

TEMP_SUBDIR = "wixtree"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_version_info_file(version: str, *, output_dir: Optional[str] = None) -> str:
    """
    Serialize installation metadata for *version* to disk.

    Args:
        version: Application version (semver).
        output_dir: Base directory. Defaults to the system temp directory.

    Returns:
        str: Absolute path to the generated descriptor.

    Raises:
        ValueError: If *version* is not a recognised version string.
        OSError: If the descriptor cannot be written.
    """
    info = build_version_info(version)

    base_dir = output_dir or os.path.join(tempfile.gettempdir(), TEMP_SUBDIR)
    target_dir = os.path.join(base_dir, version)
    os.makedirs(target_dir, exist_ok=True)

    target = os.path.abspath(os.path.join(target_dir, INSTALL_INFO_FILE_NAME))
    with open(target, "w", encoding="utf-8") as f:
        json.dump(info, f, indent=2)

    logger.debug(f"Install info for version {version} written to {target}")
    return target


def build_version_info(version: str) -> Dict[str, str]:
    """Return the descriptor payload for *version*."""
    return {
        "version": version,
        "msiVersion": to_windows_version(version),
    }


def to_windows_version(version: str) -> str:
    """
    Map a semver string onto the four-part version Windows Installer accepts.

    The fourth part is the last number found in the pre-release or build
    tail ('1.2.3-beta.4' -> '1.2.3.4'); missing parts become zero.
    """
    match = _SEMVER_RX.match((version or "").strip())
    if not match:
        raise ValueError(f"Unrecognised version string: '{version}'")

    major, minor, patch, tail = match.groups()
    build = "0"
    if tail:
        tail_match = _TAIL_NUMBER_RX.search(tail)
        if tail_match:
            build = tail_match.group(1)

    return ".".join(str(int(p or 0)) for p in (major, minor, patch, build))
