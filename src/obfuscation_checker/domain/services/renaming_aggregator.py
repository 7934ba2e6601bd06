#!/usr/bin/env python3

"""Renaming percentage over a whole member catalog."""

from ...infrastructure.logging import get_logger
from ..catalog import MemberCatalog
from .name_pattern_evaluator import NamePatternEvaluator

logger = get_logger(__name__)


class RenamingAggregator:
    """Folds the name pattern evaluator over every member of a catalog."""

    def __init__(self, evaluator: NamePatternEvaluator):
        self.evaluator = evaluator

    def count_members(self, catalog: MemberCatalog) -> tuple[int, int]:
        """Count obfuscated and total members.

        Args:
            catalog: Catalog to enumerate

        Returns:
            Tuple of (obfuscated_count, total_count)
        """
        obfuscated = 0
        total = 0

        for member in catalog.iter_members():
            total += 1
            if self.evaluator.is_likely_obfuscated(member):
                obfuscated += 1

        return obfuscated, total

    def renaming_percentage(self, catalog: MemberCatalog) -> float:
        """Fraction of members whose names look generated.

        Catalogs with at most one member report 0.0.

        Args:
            catalog: Catalog to enumerate

        Returns:
            Renaming percentage in [0, 1]
        """
        obfuscated, total = self.count_members(catalog)
        logger.debug(f"{obfuscated} of {total} members look renamed")

        if total > 1:
            return obfuscated / total
        return 0.0
