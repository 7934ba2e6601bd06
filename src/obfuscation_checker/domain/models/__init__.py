#!/usr/bin/env python3

"""Domain models for the obfuscation checker."""

from .evaluation import AnalysisStatus, EvaluationResult, FileAnalysis, Severity
from .heuristic_constants import (
    BABEL_OBFUSCATOR_ATTRIBUTE,
    LIGHTLY_OBFUSCATED_RENAMING_THRESHOLD,
    MAX_ASCII_CODE_POINT,
    MAX_SHORT_NAME_LENGTH,
    MODULE_INITIALIZER_NAME,
    MODULE_TYPE_NAME,
    OBFUSCATED_RENAMING_THRESHOLD,
    SAME_NAME_FACTOR_THRESHOLD,
)
from .member import Member, MemberKind, TypeInfo

__all__ = [
    "AnalysisStatus",
    "BABEL_OBFUSCATOR_ATTRIBUTE",
    "EvaluationResult",
    "FileAnalysis",
    "LIGHTLY_OBFUSCATED_RENAMING_THRESHOLD",
    "MAX_ASCII_CODE_POINT",
    "MAX_SHORT_NAME_LENGTH",
    "MODULE_INITIALIZER_NAME",
    "MODULE_TYPE_NAME",
    "Member",
    "MemberKind",
    "OBFUSCATED_RENAMING_THRESHOLD",
    "SAME_NAME_FACTOR_THRESHOLD",
    "Severity",
    "TypeInfo",
]
