#!/usr/bin/env python3

"""Member catalog backed by the CLI metadata of a .NET PE file.

Reads the ECMA-335 metadata tables with dnfile:

- TypeDef rows become types; their FieldList and MethodList ranges become
  fields and methods
- PropertyMap and EventMap attach properties and events to their parent type
- NestedClass links nested types to their enclosing type
- CustomAttribute rows whose parent is the Assembly row give the assembly
  attributes, named after the type declaring the attribute constructor
"""

import struct
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import dnfile
import pefile

from ..domain.catalog import MemberCatalog
from ..domain.models import MemberKind, TypeInfo
from ..exceptions import MalformedModuleError
from .logging import get_logger, log_timing

logger = get_logger(__name__)

# Errors dnfile raises while decoding damaged tables or heaps
CORRUPT_METADATA_ERRORS = (AttributeError, IndexError, KeyError, ValueError, struct.error)


def _text(value: Any) -> str:
    """Decode a metadata string value (str or dnfile heap item)."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _rows(mdtables: Any, table_name: str) -> list[Any]:
    """Rows of a metadata table, or an empty list if the module lacks it."""
    table = getattr(mdtables, table_name, None)
    if table is None:
        return []
    return list(table.rows)


def _table_name(index: Any) -> str | None:
    """Name of the table a (coded) index points into."""
    table = getattr(index, "table", None)
    if table is None:
        return None
    return table.name


def _row_index(index: Any) -> int | None:
    """1-based row number of an index; None for a dangling index."""
    return getattr(index, "row_index", None)


def _row(index: Any) -> Any:
    """Row an index resolves to; None for a dangling index."""
    return getattr(index, "row", None)


def _has_flag(flags: Any, *names: str) -> bool:
    return any(bool(getattr(flags, name, False)) for name in names)


class DotNetMemberCatalog(MemberCatalog):
    """Catalog over the manifest module of a .NET assembly file.

    Metadata is read once when the catalog is opened; the PE file is closed
    straight away and the catalog keeps only names and flags.
    """

    def __init__(self, path: Path):
        """Initialize catalog for a module file.

        Args:
            path: Path to a .dll or .exe file
        """
        self.path = path
        self.name = path.stem
        self._types: list[TypeInfo] | None = None
        self._custom_attributes: frozenset[str] = frozenset()

    @classmethod
    def open(cls, path: Path) -> "DotNetMemberCatalog":
        """Read the metadata of a module file.

        Args:
            path: Path to a .dll or .exe file

        Returns:
            Loaded catalog

        Raises:
            MalformedModuleError: If the file is not a PE, has no CLI metadata
                or its metadata is corrupt
            OSError: If the file cannot be read
        """
        catalog = cls(path)
        catalog.load()
        return catalog

    @log_timing
    def load(self) -> None:
        """Parse the PE file and build types and attributes.

        dnfile parses damaged metadata leniently and fails later with plain
        Python errors; those are reported as malformed modules too.

        Raises:
            MalformedModuleError: If the file is not a PE, has no CLI metadata
                or its metadata is structurally corrupt
        """
        logger.debug(f"Opening module: {self.path}")
        try:
            pe = dnfile.dnPE(str(self.path))
        except pefile.PEFormatError as e:
            raise MalformedModuleError(self.path, f"not a PE file ({e})") from e
        except CORRUPT_METADATA_ERRORS as e:
            raise MalformedModuleError(self.path, f"corrupt metadata ({e})") from e

        try:
            net = pe.net
            if net is None or getattr(net, "mdtables", None) is None:
                raise MalformedModuleError(self.path, "no CLI metadata")
            self._read_metadata(net.mdtables)
        except CORRUPT_METADATA_ERRORS as e:
            raise MalformedModuleError(self.path, f"corrupt metadata ({e})") from e
        finally:
            pe.close()

        logger.debug(
            f"Loaded {len(self._types or [])} types and "
            f"{len(self._custom_attributes)} assembly attributes from {self.path}"
        )

    def iter_types(self) -> Iterator[TypeInfo]:
        if self._types is None:
            raise RuntimeError("Module not loaded. Call load() first.")
        return iter(self._types)

    def custom_attributes(self) -> frozenset[str]:
        return self._custom_attributes

    def _read_metadata(self, mdtables: Any) -> None:
        types_by_rid: dict[int, TypeInfo] = {}
        method_owners: dict[int, TypeInfo] = {}

        for rid, row in enumerate(_rows(mdtables, "TypeDef"), start=1):
            type_info = TypeInfo(name=_text(row.TypeName), namespace=_text(row.TypeNamespace))

            for index in row.FieldList or []:
                field_row = _row(index)
                if field_row is None:
                    continue
                type_info.add_member(
                    _text(field_row.Name),
                    MemberKind.FIELD,
                    _has_flag(field_row.Flags, "fdSpecialName", "fdRTSpecialName"),
                )

            for index in row.MethodList or []:
                method_row = _row(index)
                if method_row is None:
                    continue
                type_info.add_member(
                    _text(method_row.Name),
                    MemberKind.METHOD,
                    _has_flag(method_row.Flags, "mdSpecialName", "mdRTSpecialName"),
                )
                method_owners[_row_index(index)] = type_info

            types_by_rid[rid] = type_info

        self._attach_map(mdtables, "PropertyMap", "PropertyList", MemberKind.PROPERTY, types_by_rid)
        self._attach_map(mdtables, "EventMap", "EventList", MemberKind.EVENT, types_by_rid)

        for row in _rows(mdtables, "NestedClass"):
            nested = types_by_rid.get(_row_index(row.NestedClass))
            enclosing = types_by_rid.get(_row_index(row.EnclosingClass))
            if nested is not None:
                nested.enclosing_type = enclosing

        self._types = list(types_by_rid.values())
        self._custom_attributes = self._read_assembly_attributes(mdtables, method_owners)

        assembly_rows = _rows(mdtables, "Assembly")
        if assembly_rows:
            self.name = _text(assembly_rows[0].Name) or self.name

    @staticmethod
    def _attach_map(
        mdtables: Any,
        map_table: str,
        list_column: str,
        kind: MemberKind,
        types_by_rid: dict[int, TypeInfo],
    ) -> None:
        """Attach PropertyMap/EventMap members to their parent types."""
        for row in _rows(mdtables, map_table):
            parent = _row_index(row.Parent)
            owner = types_by_rid.get(parent)
            if owner is None:
                logger.debug(f"{map_table} row with unknown parent {parent}")
                continue

            for index in getattr(row, list_column) or []:
                member_row = _row(index)
                if member_row is not None:
                    owner.add_member(_text(member_row.Name), kind)

    @staticmethod
    def _read_assembly_attributes(
        mdtables: Any, method_owners: dict[int, TypeInfo]
    ) -> frozenset[str]:
        names = set()
        for row in _rows(mdtables, "CustomAttribute"):
            if _table_name(row.Parent) != "Assembly":
                continue

            name = DotNetMemberCatalog._attribute_type_name(row.Type, method_owners)
            if name:
                names.add(name)
        return frozenset(names)

    @staticmethod
    def _attribute_type_name(ctor: Any, method_owners: dict[int, TypeInfo]) -> str | None:
        """Resolve an attribute constructor to its declaring type name.

        Args:
            ctor: CustomAttributeType coded index (MethodDef or MemberRef)
            method_owners: MethodDef row index -> declaring type

        Returns:
            Simple type name, or None if it cannot be resolved
        """
        table_name = _table_name(ctor)

        if table_name == "MethodDef":
            owner = method_owners.get(_row_index(ctor))
            return owner.name if owner is not None else None

        if table_name == "MemberRef":
            member_ref = _row(ctor)
            if member_ref is None:
                return None
            parent = getattr(member_ref, "Class", None)
            parent_row = _row(parent)
            if _table_name(parent) in ("TypeRef", "TypeDef") and parent_row is not None:
                return _text(parent_row.TypeName)

        return None
