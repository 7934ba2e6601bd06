#!/usr/bin/env python3

"""Sibling resolution for shared-root name similarity.

Obfuscators tend to rename every member of one scope with the same short
stem plus a unique suffix. The sibling set of a member is the scope it is
compared against:

- types: all types of the module in the same namespace
- fields, properties, events, methods: the declaring type's non-special
  members of the same kind

A member is always part of its own sibling set.
"""

from collections import defaultdict

from ...infrastructure.logging import get_logger
from ..catalog import MemberCatalog
from ..models import Member, MemberKind

logger = get_logger(__name__)


class RelatedMemberResolver:
    """Resolves the sibling set of a member within one catalog."""

    def __init__(self, catalog: MemberCatalog):
        """Initialize resolver for a catalog.

        Args:
            catalog: Module whose types make up the namespace groups
        """
        self.catalog = catalog
        self._types_by_namespace: dict[str, list[Member]] | None = None

    def related_members(self, member: Member) -> list[Member]:
        """Return the members comparable to ``member``.

        Args:
            member: Member being evaluated

        Returns:
            Sibling members, ``member`` included; empty when the member has
            no scope to compare against
        """
        if member.kind is MemberKind.TYPE:
            return self._namespace_siblings(member.namespace or "")

        if member.declaring_type is not None:
            return member.declaring_type.members_of(member.kind)

        return []

    def _namespace_siblings(self, namespace: str) -> list[Member]:
        if self._types_by_namespace is None:
            self._types_by_namespace = self._index_types()
        return self._types_by_namespace.get(namespace, [])

    def _index_types(self) -> dict[str, list[Member]]:
        index: dict[str, list[Member]] = defaultdict(list)
        for type_info in self.catalog.iter_types():
            index[type_info.namespace].append(type_info.as_member())

        logger.debug(f"Indexed types of {len(index)} namespaces")
        return dict(index)
