#!/usr/bin/env python3

"""Domain services: the obfuscation heuristics."""

from .classifier import classify
from .name_pattern_evaluator import NamePatternEvaluator, is_ascii, is_lowercase
from .related_member_resolver import RelatedMemberResolver
from .renaming_aggregator import RenamingAggregator
from .structural_signal_detector import StructuralSignalDetector

__all__ = [
    "NamePatternEvaluator",
    "RelatedMemberResolver",
    "RenamingAggregator",
    "StructuralSignalDetector",
    "classify",
    "is_ascii",
    "is_lowercase",
]
