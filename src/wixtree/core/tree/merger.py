from __future__ import annotations

"""
Manifest Merger.

Places a manifest of files into a tree produced by the builder and injects
the synthetic installer records at the tree root.

The operation follows a clone-then-mutate contract: the input tree is
copied with TreeNode.clone() first and only the copy is modified, so
callers may keep or discard their tree freely.

    files = [
        'slack/slack.exe',
        'slack/resources/text.txt',
        'slack/locales/de-DE.json',
    ]

    slack/
    ├── [reg] HKLM\\SOFTWARE\\{{Manufacturer}}\\{{ApplicationName}}\\InstallPath
    ├── Slack.exe
    ├── .installInfo.json
    └── app-1.0
        ├── slack.exe
        ├── resources
        │   └── text.txt
        └── locales
            └── de-DE.json
"""

import logging
import os
from typing import Callable, Optional, Sequence

from wixtree.core.tree.paths import basename, relative_segments, split_segments
from wixtree.domain.constants import (
    INSTALL_INFO_FILE_NAME,
    INSTALL_PATH_REGISTRY,
    STUB_EXECUTABLE_SUFFIX,
    UPDATER_FILE_NAME,
    UPDATER_VENDOR_BINARY,
    version_node_name,
)
from wixtree.domain.errors import DuplicateFileEntry, MissingDirectoryNode
from wixtree.domain.tree_models import FileRecord, RegistryRecord, TreeNode
from wixtree.infra.version_info import create_version_info_file

logger = logging.getLogger(__name__)

VersionInfoFactory = Callable[[str], str]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def merge_manifest(
        tree: TreeNode,
        files: Sequence[str],
        executable_name: str,
        stub_executable_path: str,
        auto_update: bool,
        version_label: str,
        *,
        version_info_factory: Optional[VersionInfoFactory] = None,
        updater_path: Optional[str] = None,
        strict: bool = False,
        sep: Optional[str] = None,
) -> TreeNode:
    """
    Return a copy of *tree* with the manifest and installer records attached.

    Root records are appended in a fixed order: the unversioned stub
    launcher, the install info descriptor, then the updater if enabled.
    Every manifest file is appended to the directory node that owns it
    inside the 'app-<version_label>' subtree.

    Args:
        tree: Versioned tree produced by build_tree. Never modified.
        files: File paths to place, in packaging order.
        executable_name: Application executable name without extension.
        stub_executable_path: Source path of the root launcher stub.
        auto_update: Whether to ship the updater binary at the root.
        version_label: Version used for the entry point and install info.
        version_info_factory: Callable producing the install info file path.
                              Defaults to create_version_info_file.
        updater_path: Source path of the updater binary. Defaults to the
                      bundled vendor binary.
        strict: Raise DuplicateFileEntry instead of skipping duplicates.
        sep: Segment separator. Defaults to the process-wide separator.

    Returns:
        TreeNode: The new, independent tree.

    Raises:
        MissingDirectoryNode: A file's directory is absent from the tree.
        DuplicateFileEntry: In strict mode, a file is placed twice.
    """
    factory = version_info_factory or create_version_info_file
    output = tree.clone()

    # Unversioned launcher, since the real exe lives in the versioned folder
    output.add_file(FileRecord(
        name=f"{executable_name}{STUB_EXECUTABLE_SUFFIX}",
        path=stub_executable_path,
    ))
    output.add_file(FileRecord(name=INSTALL_INFO_FILE_NAME, path=factory(version_label)))
    output.add_registry_entry(RegistryRecord(**INSTALL_PATH_REGISTRY))

    if auto_update:
        output.add_file(FileRecord(
            name=UPDATER_FILE_NAME,
            path=updater_path or default_updater_path(),
        ))

    entry_name = version_node_name(version_label)
    entry_point = output.get_child(entry_name)
    if entry_point is None:
        raise MissingDirectoryNode(output.path, entry_name)

    for file_path in files:
        target = _resolve_parent(entry_point, file_path, sep)
        _place_file(target, FileRecord(name=basename(file_path, sep), path=file_path), strict)

    logger.info(
        f"Merged {len(files)} files into '{output.path}' "
        f"(version {version_label}, auto update: {auto_update})"
    )
    return output


def default_updater_path() -> str:
    """Absolute path of the updater binary shipped with this package."""
    package_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(package_dir, "vendor", UPDATER_VENDOR_BINARY)


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _resolve_parent(entry_point: TreeNode, file_path: str, sep: Optional[str]) -> TreeNode:
    """Walk from the entry point to the node that owns *file_path*."""
    steps = relative_segments(entry_point.path, file_path, sep)
    if not steps:
        raise MissingDirectoryNode(file_path, _first_divergent_segment(entry_point.path, file_path, sep))

    target = entry_point
    for step in steps[:-1]:
        child = target.get_child(step)
        if child is None:
            raise MissingDirectoryNode(file_path, step)
        target = child
    return target


def _place_file(target: TreeNode, record: FileRecord, strict: bool) -> None:
    if target.has_file(record.path):
        if strict:
            raise DuplicateFileEntry(record.path, target.path)
        logger.warning(f"Skipping duplicate file entry '{record.path}' in '{target.path}'")
        return
    target.add_file(record)


def _first_divergent_segment(root: str, file_path: str, sep: Optional[str]) -> str:
    """Name the first segment of *file_path* that leaves *root*."""
    root_parts = split_segments(root, sep)
    file_parts = split_segments(file_path, sep)
    for i, part in enumerate(file_parts):
        if i >= len(root_parts) or part != root_parts[i]:
            return part
    return file_parts[-1]
