"""Tests for module file discovery."""

from pathlib import Path

import pytest

from obfuscation_checker.utils import find_module_files, is_module_file


@pytest.mark.unit
def test_is_module_file() -> None:
    extensions = {".dll", ".exe"}
    assert is_module_file(Path("a.dll"), extensions)
    assert is_module_file(Path("A.DLL"), extensions)
    assert is_module_file(Path("setup.Exe"), extensions)
    assert not is_module_file(Path("a.dll.config"), extensions)
    assert not is_module_file(Path("dll"), extensions)


@pytest.mark.unit
def test_find_module_files_recurses(tmp_path: Path) -> None:
    (tmp_path / "bin" / "x64").mkdir(parents=True)
    for name in ["bin/App.exe", "bin/x64/Native.DLL", "bin/App.pdb", "readme.md"]:
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "bin" / "folder.dll").mkdir()

    found = find_module_files(tmp_path, [".dll", ".EXE"])

    assert found == [tmp_path / "bin" / "App.exe", tmp_path / "bin" / "x64" / "Native.DLL"]
