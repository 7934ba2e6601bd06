#!/usr/bin/env python3

"""Name pattern heuristics for machine-generated identifiers.

Rules, first match decides:

1. Non-ASCII name: obfuscated. Renamers like to emit unusual or non-Latin
   glyphs that defeat readability and naive tooling.
2. Short name (``len <= max_name_length``): obfuscated iff all lowercase
   ASCII letters (``a``, ``bc``, ``xyz``). Short names with digits, capitals
   or punctuation are left alone.
3. Longer name: split off a suffix of ``max_name_length`` characters. If the
   remaining root is lowercase and more than half of the member's siblings
   start with that root, the member is obfuscated (``fn001``, ``fn002``...).
4. Anything else is not obfuscated.

No Unicode normalization is applied to names.
"""

from ..models import (
    MAX_ASCII_CODE_POINT,
    MAX_SHORT_NAME_LENGTH,
    SAME_NAME_FACTOR_THRESHOLD,
    Member,
)
from .related_member_resolver import RelatedMemberResolver


def is_ascii(text: str) -> bool:
    """Check that every character is at most code point 127."""
    return all(ord(c) <= MAX_ASCII_CODE_POINT for c in text)


def is_lowercase(text: str) -> bool:
    """Check that text is non-empty and made of ``a`` to ``z`` only."""
    return bool(text) and all("a" <= c <= "z" for c in text)


class NamePatternEvaluator:
    """Decides whether a member name looks generated by an obfuscator."""

    def __init__(
        self,
        resolver: RelatedMemberResolver,
        max_name_length: int = MAX_SHORT_NAME_LENGTH,
        same_name_threshold: float = SAME_NAME_FACTOR_THRESHOLD,
    ):
        """Initialize evaluator.

        Args:
            resolver: Provides sibling sets for the shared-root rule
            max_name_length: Short-name threshold and suffix length
            same_name_threshold: Fraction of siblings that must share the root
        """
        if max_name_length < 1:
            raise ValueError(f"max_name_length must be positive: {max_name_length}")

        self.resolver = resolver
        self.max_name_length = max_name_length
        self.same_name_threshold = same_name_threshold

    def is_likely_obfuscated(self, member: Member) -> bool:
        """Apply the name rules to one member.

        Args:
            member: Member to evaluate

        Returns:
            True if the name matches an obfuscation pattern
        """
        name = member.name

        if not is_ascii(name):
            return True

        if len(name) <= self.max_name_length:
            return is_lowercase(name)

        root = name[: len(name) - self.max_name_length]
        if is_lowercase(root):
            siblings = self.resolver.related_members(member)
            if siblings:
                return self.same_name_factor(root, siblings) > self.same_name_threshold

        return False

    @staticmethod
    def same_name_factor(root: str, siblings: list[Member]) -> float:
        """Fraction of siblings whose name starts with ``root``.

        Examples:
            - root "fn", siblings fn001, fn002, fn003, Calculate: 0.75
        """
        matching = sum(1 for sibling in siblings if sibling.name.startswith(root))
        return matching / len(siblings)
