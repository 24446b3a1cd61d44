from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Reads the path manifests that feed the tree builder.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def read_path_list(list_file: str) -> List[str]:
    """
    Read one path per line from *list_file*.

    Blank lines and lines starting with '#' are skipped; surrounding
    whitespace and line endings are stripped. Order is preserved.

    Args:
        list_file: Text file holding the paths.

    Returns:
        List[str]: The paths in file order.

    Raises:
        OSError: If the file cannot be read.
    """
    paths: List[str] = []
    with open(list_file, "r", encoding="utf-8") as f:
        for line in f:
            entry = line.strip()
            if not entry or entry.startswith(COMMENT_PREFIX):
                continue
            paths.append(entry)

    logger.debug(f"Read {len(paths)} paths from {list_file}")
    return paths
