#!/usr/bin/env python3

"""Member catalogs exposing module metadata to the heuristics."""

from .member_catalog import MemberCatalog, StaticMemberCatalog

__all__ = [
    "MemberCatalog",
    "StaticMemberCatalog",
]
