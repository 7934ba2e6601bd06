#!/usr/bin/env python3

"""Member catalog: the introspection interface the heuristics consume.

A catalog exposes one module's declared types and members as a lazily
produced sequence, plus the assembly-level custom attributes. Each call to
``iter_members`` starts a fresh enumeration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from ..models import MODULE_TYPE_NAME, Member, MemberKind, TypeInfo


class MemberCatalog(ABC):
    """Abstract base class for member catalogs.

    Subclasses provide the types and the custom attributes; enumeration and
    lookups are shared.
    """

    name: str = ""

    @abstractmethod
    def iter_types(self) -> Iterator[TypeInfo]:
        """Yield every type of the module, nested types included."""

    @abstractmethod
    def custom_attributes(self) -> frozenset[str]:
        """Type names of the custom attributes attached to the assembly."""

    def iter_members(self) -> Iterator[Member]:
        """Yield each type followed by its evaluated members.

        Special-name fields and methods (constructors, accessors, backing
        ``value__`` fields...) are excluded.
        """
        for type_info in self.iter_types():
            yield type_info.as_member()
            yield from type_info.members_of(MemberKind.FIELD)
            yield from type_info.members_of(MemberKind.PROPERTY)
            yield from type_info.members_of(MemberKind.EVENT)
            yield from type_info.members_of(MemberKind.METHOD)

    def find_type(self, name: str, namespace: str = "") -> TypeInfo | None:
        for type_info in self.iter_types():
            if type_info.name == name and type_info.namespace == namespace:
                return type_info
        return None

    def find_synthetic_container_type(self) -> TypeInfo | None:
        """Return the ``<Module>`` type, if the module declares one."""
        return self.find_type(MODULE_TYPE_NAME)

    @staticmethod
    def find_method_by_name(type_info: TypeInfo, name: str) -> Member | None:
        """Find a method of a type by name, special-name methods included."""
        for method in type_info.methods:
            if method.name == name:
                return method
        return None


class StaticMemberCatalog(MemberCatalog):
    """Catalog over an in-memory list of types.

    Useful for metadata produced by other readers, and for tests.
    """

    def __init__(
        self,
        types: Iterable[TypeInfo],
        custom_attributes: Iterable[str] = (),
        name: str = "",
    ):
        self._types = list(types)
        self._custom_attributes = frozenset(custom_attributes)
        self.name = name

    def iter_types(self) -> Iterator[TypeInfo]:
        return iter(self._types)

    def custom_attributes(self) -> frozenset[str]:
        return self._custom_attributes
