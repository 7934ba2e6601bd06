#!/usr/bin/env python3

"""Fusion of renaming percentage and structural signals into a decision."""

from ..models import EvaluationResult


def classify(
    renaming_percentage: float,
    has_marker_attribute: bool,
    has_synthetic_initializer: bool,
) -> EvaluationResult:
    """Build the evaluation result for one assembly.

    The assembly is obfuscated if the renaming percentage exceeds 0.4 or
    either structural signal is present. A clean assembly above 0.2 is
    reported as lightly obfuscated (see ``EvaluationResult.severity``).

    Args:
        renaming_percentage: Fraction of renamed members
        has_marker_attribute: Obfuscator marker attribute found
        has_synthetic_initializer: Generated module initializer found

    Returns:
        Immutable evaluation result
    """
    return EvaluationResult(
        renaming_percentage=renaming_percentage,
        has_marker_attribute=has_marker_attribute,
        has_synthetic_initializer=has_synthetic_initializer,
    )
