from __future__ import annotations

"""
Unit tests for the Manifest Merger.

Verifies file placement inside the versioned subtree, the synthetic root
records, clone-then-mutate behaviour and the error contract.
"""

import os

import pytest

from wixtree.core.tree.builder import build_tree
from wixtree.core.tree.merger import default_updater_path, merge_manifest
from wixtree.domain.constants import PATH_SEPARATOR as SEP
from wixtree.domain.errors import DuplicateFileEntry, MissingDirectoryNode
from wixtree.domain.tree_models import FileRecord, RegistryRecord


def p(*parts: str) -> str:
    return SEP.join(parts)


@pytest.fixture
def versioned_tree(sample_dirs):
    return build_tree(sample_dirs, "a", "1.0")


def _merge(tree, files, info_factory, **kwargs):
    params = dict(
        executable_name="App",
        stub_executable_path=p("a", "App.exe"),
        auto_update=False,
        version_label="1.0",
        version_info_factory=info_factory,
    )
    params.update(kwargs)
    return merge_manifest(tree, files, **params)


def test_reference_merge(versioned_tree, info_factory):
    file_path = p("a", "b", "c", "file.txt")
    out = _merge(versioned_tree, [file_path], info_factory)

    assert [f.name for f in out.files] == ["App.exe", ".installInfo.json"]
    assert out.files[0].path == p("a", "App.exe")
    assert out.files[1].path == info_factory("1.0")

    target = out.find("app-1.0", "b", "c")
    assert target.files == [FileRecord(name="file.txt", path=file_path)]

    for node, _ in out.walk():
        assert all(f.name != "Update.exe" for f in node.files)


def test_install_path_registry_entry(versioned_tree, info_factory):
    out = _merge(versioned_tree, [], info_factory)

    assert out.registry_entries == [
        RegistryRecord(
            id="RegistryInstallPath",
            root="HKLM",
            name="InstallPath",
            key="SOFTWARE\\{{Manufacturer}}\\{{ApplicationName}}",
            type="string",
            value="[APPLICATIONROOTDIRECTORY]",
        )
    ]
    assert out.children["app-1.0"].registry_entries == []


def test_version_info_factory_receives_version(versioned_tree, info_factory):
    _merge(versioned_tree, [], info_factory)
    assert info_factory.calls == ["1.0"]


def test_auto_update_adds_updater_last(versioned_tree, info_factory):
    out = _merge(versioned_tree, [], info_factory, auto_update=True, updater_path="vendor/Update.bin")

    assert [f.name for f in out.files] == ["App.exe", ".installInfo.json", "Update.exe"]
    assert out.files[-1].path == "vendor/Update.bin"


def test_auto_update_defaults_to_bundled_binary(versioned_tree, info_factory):
    out = _merge(versioned_tree, [], info_factory, auto_update=True)

    assert out.files[-1].path == default_updater_path()
    assert os.path.basename(default_updater_path()) == "MsiAwareSquirrel_1.9.1.exe"


def test_files_keep_manifest_order(versioned_tree, info_factory):
    files = [p("a", "d", "z.json"), p("a", "d", "a.json"), p("a", "main.exe")]
    out = _merge(versioned_tree, files, info_factory)

    assert [f.name for f in out.find("app-1.0", "d").files] == ["z.json", "a.json"]
    assert [f.name for f in out.children["app-1.0"].files] == ["main.exe"]


def test_input_tree_is_not_mutated(versioned_tree, info_factory):
    before = versioned_tree.clone()
    out = _merge(versioned_tree, [p("a", "b", "x.txt")], info_factory)

    assert versioned_tree == before
    assert out is not versioned_tree
    assert out.children["app-1.0"] is not versioned_tree.children["app-1.0"]


def test_merge_is_repeatable(versioned_tree, info_factory):
    files = [p("a", "b", "c", "file.txt"), p("a", "d", "x.dll")]
    first = _merge(versioned_tree.clone(), files, info_factory, auto_update=True)
    second = _merge(versioned_tree.clone(), files, info_factory, auto_update=True)
    assert first == second


def test_missing_intermediate_directory_raises(versioned_tree, info_factory):
    orphan = p("a", "b", "missing", "file.txt")
    with pytest.raises(MissingDirectoryNode) as exc:
        _merge(versioned_tree, [orphan], info_factory)

    assert exc.value.path == orphan
    assert exc.value.segment == "missing"
    assert orphan in str(exc.value)


def test_file_outside_root_raises(versioned_tree, info_factory):
    stray = p("elsewhere", "file.txt")
    with pytest.raises(MissingDirectoryNode) as exc:
        _merge(versioned_tree, [stray], info_factory)

    assert exc.value.path == stray
    assert exc.value.segment == "elsewhere"


def test_unversioned_tree_has_no_entry_point(sample_dirs, info_factory):
    tree = build_tree(sample_dirs, "a")
    with pytest.raises(MissingDirectoryNode) as exc:
        _merge(tree, [], info_factory)
    assert exc.value.segment == "app-1.0"


def test_duplicate_files_are_skipped(versioned_tree, info_factory):
    dup = p("a", "d", "x.dll")
    out = _merge(versioned_tree, [dup, dup], info_factory)
    assert out.find("app-1.0", "d").files == [FileRecord(name="x.dll", path=dup)]


def test_duplicate_files_raise_in_strict_mode(versioned_tree, info_factory):
    dup = p("a", "d", "x.dll")
    with pytest.raises(DuplicateFileEntry) as exc:
        _merge(versioned_tree, [dup, dup], info_factory, strict=True)
    assert exc.value.path == dup
    assert exc.value.node_path == p("a", "d")


def test_version_info_errors_propagate(versioned_tree):
    def broken(version: str) -> str:
        raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        _merge(versioned_tree, [], broken)
