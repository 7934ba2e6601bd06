#!/usr/bin/env python3

"""Unit tests for the dnfile-backed member catalog.

Metadata tables are faked with simple namespaces shaped like dnfile rows and
table indexes.
"""

import struct
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pefile
import pytest

from obfuscation_checker.domain.models import MemberKind
from obfuscation_checker.exceptions import MalformedModuleError
from obfuscation_checker.infrastructure.dotnet_catalog import DotNetMemberCatalog, _text

DNPE = "obfuscation_checker.infrastructure.dotnet_catalog.dnfile.dnPE"


def _index(table_name: str, row_index: int, row: object = None) -> SimpleNamespace:
    return SimpleNamespace(table=SimpleNamespace(name=table_name), row_index=row_index, row=row)


def _table(*rows: object) -> SimpleNamespace:
    return SimpleNamespace(rows=list(rows))


def _field(name: str, special: bool = False) -> SimpleNamespace:
    flags = SimpleNamespace(fdSpecialName=special, fdRTSpecialName=special)
    return SimpleNamespace(Name=name, Flags=flags)


def _method(name: str, special: bool = False) -> SimpleNamespace:
    flags = SimpleNamespace(mdSpecialName=special, mdRTSpecialName=special)
    return SimpleNamespace(Name=name, Flags=flags)


def _typedef(name: str, namespace: str = "", fields=(), methods=()) -> SimpleNamespace:
    return SimpleNamespace(
        TypeName=name,
        TypeNamespace=namespace,
        FieldList=list(fields),
        MethodList=list(methods),
    )


@pytest.fixture
def mdtables() -> SimpleNamespace:
    """Metadata of a small Babel-obfuscated assembly."""
    typedefs = _table(
        _typedef("<Module>", methods=[_index("MethodDef", 1, _method("@!"))]),
        _typedef(
            "Program",
            "App",
            fields=[
                _index("Field", 1, _field("_count")),
                _index("Field", 2, _field("value__", special=True)),
            ],
            methods=[
                _index("MethodDef", 2, _method("Main")),
                _index("MethodDef", 3, _method(".ctor", special=True)),
            ],
        ),
        _typedef(
            "BabelObfuscatorAttribute",
            methods=[_index("MethodDef", 4, _method(".ctor", special=True))],
        ),
        _typedef("Inner"),
    )
    title_ref = SimpleNamespace(
        Class=_index("TypeRef", 7, SimpleNamespace(TypeName="AssemblyTitleAttribute")),
        Name=".ctor",
    )
    return SimpleNamespace(
        TypeDef=typedefs,
        PropertyMap=_table(
            SimpleNamespace(
                Parent=_index("TypeDef", 2),
                PropertyList=[_index("Property", 1, SimpleNamespace(Name="Count"))],
            )
        ),
        EventMap=_table(
            SimpleNamespace(
                Parent=_index("TypeDef", 2),
                EventList=[_index("Event", 1, SimpleNamespace(Name="Started"))],
            )
        ),
        NestedClass=_table(
            SimpleNamespace(NestedClass=_index("TypeDef", 4), EnclosingClass=_index("TypeDef", 2))
        ),
        CustomAttribute=_table(
            SimpleNamespace(Parent=_index("Assembly", 1), Type=_index("MethodDef", 4)),
            SimpleNamespace(Parent=_index("Assembly", 1), Type=_index("MemberRef", 3, title_ref)),
            SimpleNamespace(Parent=_index("TypeDef", 2), Type=_index("MemberRef", 5, title_ref)),
        ),
        Assembly=_table(SimpleNamespace(Name="ObfApp")),
    )


def _pe(mdtables: object) -> Mock:
    pe = Mock()
    pe.net = SimpleNamespace(mdtables=mdtables)
    return pe


@pytest.mark.unit
class TestDotNetMemberCatalog:
    """Tests for DotNetMemberCatalog.open()."""

    def test_types_and_members(self, mdtables: SimpleNamespace) -> None:
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("ObfApp.dll"))

        types = {t.name: t for t in catalog.iter_types()}
        assert list(types) == ["<Module>", "Program", "BabelObfuscatorAttribute", "Inner"]

        program = types["Program"]
        assert program.namespace == "App"
        assert [m.name for m in program.members_of(MemberKind.FIELD)] == ["_count"]
        assert [m.name for m in program.members_of(MemberKind.METHOD)] == ["Main"]
        assert [m.name for m in program.properties] == ["Count"]
        assert [m.name for m in program.events] == ["Started"]
        assert [m.name for m in program.methods] == ["Main", ".ctor"]

    def test_special_names_are_flagged(self, mdtables: SimpleNamespace) -> None:
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("ObfApp.dll"))

        program = catalog.find_type("Program", "App")
        assert program is not None
        assert [m.is_special_name for m in program.fields] == [False, True]

    def test_nested_types_are_linked(self, mdtables: SimpleNamespace) -> None:
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("ObfApp.dll"))

        inner = catalog.find_type("Inner")
        assert inner is not None
        assert inner.enclosing_type is catalog.find_type("Program", "App")

    def test_assembly_attributes(self, mdtables: SimpleNamespace) -> None:
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("ObfApp.dll"))

        assert catalog.custom_attributes() == frozenset(
            {"BabelObfuscatorAttribute", "AssemblyTitleAttribute"}
        )

    def test_assembly_name(self, mdtables: SimpleNamespace) -> None:
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("renamed-file.dll"))

        assert catalog.name == "ObfApp"

    def test_netmodule_falls_back_to_file_name(self, mdtables: SimpleNamespace) -> None:
        del mdtables.Assembly
        del mdtables.CustomAttribute
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("Part.netmodule.dll"))

        assert catalog.name == "Part.netmodule"
        assert catalog.custom_attributes() == frozenset()

    def test_file_is_closed(self, mdtables: SimpleNamespace) -> None:
        pe = _pe(mdtables)
        with patch(DNPE, return_value=pe):
            DotNetMemberCatalog.open(Path("ObfApp.dll"))

        pe.close.assert_called_once()

    def test_not_a_pe_file(self) -> None:
        with patch(DNPE, side_effect=pefile.PEFormatError("DOS Header magic not found.")):
            with pytest.raises(MalformedModuleError):
                DotNetMemberCatalog.open(Path("readme.dll"))

    def test_native_pe_file(self) -> None:
        pe = Mock()
        pe.net = None
        with patch(DNPE, return_value=pe):
            with pytest.raises(MalformedModuleError, match="no CLI metadata"):
                DotNetMemberCatalog.open(Path("native.dll"))

        pe.close.assert_called_once()

    def test_os_errors_propagate(self) -> None:
        with patch(DNPE, side_effect=PermissionError("Permission denied")):
            with pytest.raises(PermissionError):
                DotNetMemberCatalog.open(Path("locked.dll"))

    def test_dangling_map_parent_is_ignored(self, mdtables: SimpleNamespace) -> None:
        mdtables.PropertyMap.rows.append(
            SimpleNamespace(
                Parent=None,
                PropertyList=[_index("Property", 2, SimpleNamespace(Name="Lost"))],
            )
        )
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("ObfApp.dll"))

        program = catalog.find_type("Program", "App")
        assert program is not None
        assert [m.name for m in program.properties] == ["Count"]

    def test_dangling_indexes_are_unresolved(self, mdtables: SimpleNamespace) -> None:
        mdtables.TypeDef.rows[1].FieldList.append(None)
        mdtables.NestedClass.rows.append(SimpleNamespace(NestedClass=None, EnclosingClass=None))
        mdtables.CustomAttribute.rows.append(
            SimpleNamespace(Parent=_index("Assembly", 1), Type=_index("MemberRef", 9, None))
        )
        mdtables.CustomAttribute.rows.append(
            SimpleNamespace(
                Parent=_index("Assembly", 1),
                Type=_index("MemberRef", 10, SimpleNamespace(Class=None, Name=".ctor")),
            )
        )
        with patch(DNPE, return_value=_pe(mdtables)):
            catalog = DotNetMemberCatalog.open(Path("ObfApp.dll"))

        program = catalog.find_type("Program", "App")
        assert program is not None
        assert [m.name for m in program.fields] == ["_count", "value__"]
        assert catalog.custom_attributes() == frozenset(
            {"BabelObfuscatorAttribute", "AssemblyTitleAttribute"}
        )

    @pytest.mark.parametrize(
        "error",
        [
            AttributeError("'ManifestResourceRowStruct' object has no attribute 'Implementation'"),
            IndexError("list index out of range"),
            struct.error("unpack requires a buffer of 4 bytes"),
        ],
    )
    def test_corrupt_metadata_while_parsing(self, error: Exception) -> None:
        with patch(DNPE, side_effect=error):
            with pytest.raises(MalformedModuleError, match="corrupt metadata"):
                DotNetMemberCatalog.open(Path("damaged.dll"))

    def test_corrupt_metadata_while_reading_tables(self, mdtables: SimpleNamespace) -> None:
        mdtables.TypeDef.rows.append(SimpleNamespace(TypeName="Broken"))
        pe = _pe(mdtables)
        with patch(DNPE, return_value=pe):
            with pytest.raises(MalformedModuleError, match="corrupt metadata"):
                DotNetMemberCatalog.open(Path("damaged.dll"))

        pe.close.assert_called_once()

    def test_iter_types_requires_load(self) -> None:
        with pytest.raises(RuntimeError):
            list(DotNetMemberCatalog(Path("ObfApp.dll")).iter_types())


@pytest.mark.unit
def test_text_decoding() -> None:
    class HeapItem:
        def __str__(self) -> str:
            return "Decoded"

    assert _text(None) == ""
    assert _text(b"Name") == "Name"
    assert _text(HeapItem()) == "Decoded"


@pytest.mark.integration
def test_garbage_file_is_malformed(tmp_path: Path) -> None:
    """A file that is not a PE image is reported as malformed by the real reader."""
    path = tmp_path / "garbage.dll"
    path.write_bytes(b"this is not a portable executable\n" * 8)

    with pytest.raises(MalformedModuleError):
        DotNetMemberCatalog.open(path)
