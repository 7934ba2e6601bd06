#!/usr/bin/env python3

"""Member and type models for .NET metadata introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MemberKind(Enum):
    """Kinds of declared members the checker evaluates."""

    TYPE = "type"
    FIELD = "field"
    PROPERTY = "property"
    EVENT = "event"
    METHOD = "method"

    def __str__(self) -> str:
        """Return capitalized string representation."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Member:
    """A named declaration of a module.

    ``declaring_type`` is a back reference to the owning type; it never takes
    part in equality or repr, so members stay cheap to compare and print.
    """

    name: str
    kind: MemberKind
    namespace: str | None = None  # only set for TYPE members
    declaring_type: TypeInfo | None = field(default=None, compare=False, repr=False)
    is_special_name: bool = False


@dataclass(eq=False)
class TypeInfo:
    """Information about a declared type and its members."""

    name: str
    namespace: str = ""
    fields: list[Member] = field(default_factory=list)
    properties: list[Member] = field(default_factory=list)
    events: list[Member] = field(default_factory=list)
    methods: list[Member] = field(default_factory=list)
    enclosing_type: TypeInfo | None = field(default=None, repr=False)

    def as_member(self) -> Member:
        """Return the TYPE member describing this type."""
        return Member(
            name=self.name,
            kind=MemberKind.TYPE,
            namespace=self.namespace,
            declaring_type=self.enclosing_type,
        )

    def add_member(self, name: str, kind: MemberKind, is_special_name: bool = False) -> Member:
        """Create a member declared by this type and attach it.

        Args:
            name: Member name
            kind: Member kind (anything but TYPE)
            is_special_name: Compiler or runtime special name flag

        Returns:
            The attached member
        """
        if kind is MemberKind.TYPE:
            raise ValueError("Types are not declared through add_member")

        member = Member(
            name=name,
            kind=kind,
            declaring_type=self,
            is_special_name=is_special_name,
        )
        self._members_list(kind).append(member)
        return member

    def members_of(self, kind: MemberKind) -> list[Member]:
        """Non-special members of the given kind."""
        return [m for m in self._members_list(kind) if not m.is_special_name]

    def _members_list(self, kind: MemberKind) -> list[Member]:
        if kind is MemberKind.FIELD:
            return self.fields
        if kind is MemberKind.PROPERTY:
            return self.properties
        if kind is MemberKind.EVENT:
            return self.events
        if kind is MemberKind.METHOD:
            return self.methods
        raise ValueError(f"No member list for kind: {kind}")
