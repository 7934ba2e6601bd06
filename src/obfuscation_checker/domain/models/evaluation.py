#!/usr/bin/env python3

"""Evaluation result models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .heuristic_constants import (
    LIGHTLY_OBFUSCATED_RENAMING_THRESHOLD,
    OBFUSCATED_RENAMING_THRESHOLD,
)


class Severity(Enum):
    """Severity tier reported for an assembly."""

    OBFUSCATED = "obfuscated"
    LIGHTLY_OBFUSCATED = "lightly obfuscated"
    NOT_OBFUSCATED = "not obfuscated"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EvaluationResult:
    """Signals gathered for one assembly and the decision derived from them."""

    renaming_percentage: float
    has_marker_attribute: bool
    has_synthetic_initializer: bool

    def __post_init__(self) -> None:
        if not 0.0 <= self.renaming_percentage <= 1.0:
            raise ValueError(
                f"Renaming percentage out of range: {self.renaming_percentage}"
            )

    @property
    def is_obfuscated(self) -> bool:
        """Any structural signal, or a renaming percentage above the threshold."""
        return (
            self.renaming_percentage > OBFUSCATED_RENAMING_THRESHOLD
            or self.has_marker_attribute
            or self.has_synthetic_initializer
        )

    @property
    def severity(self) -> Severity:
        if self.is_obfuscated:
            return Severity.OBFUSCATED
        if self.renaming_percentage > LIGHTLY_OBFUSCATED_RENAMING_THRESHOLD:
            return Severity.LIGHTLY_OBFUSCATED
        return Severity.NOT_OBFUSCATED


class AnalysisStatus(Enum):
    """Outcome of analyzing a single file."""

    ANALYZED = "analyzed"
    SKIPPED = "skipped"  # not a readable .NET module
    FAILED = "failed"


@dataclass(frozen=True)
class FileAnalysis:
    """Result of analyzing one file.

    Exactly one of ``result`` (ANALYZED) or ``error`` (SKIPPED, FAILED) is set.
    """

    path: Path
    status: AnalysisStatus
    assembly_name: str | None = None
    result: EvaluationResult | None = None
    error: str | None = None

    @classmethod
    def analyzed(cls, path: Path, assembly_name: str, result: EvaluationResult) -> "FileAnalysis":
        return cls(path, AnalysisStatus.ANALYZED, assembly_name=assembly_name, result=result)

    @classmethod
    def skipped(cls, path: Path, reason: str) -> "FileAnalysis":
        return cls(path, AnalysisStatus.SKIPPED, error=reason)

    @classmethod
    def failed(cls, path: Path, error: str) -> "FileAnalysis":
        return cls(path, AnalysisStatus.FAILED, error=error)

    @property
    def is_obfuscated(self) -> bool:
        """True only for analyzed files classified as obfuscated."""
        return self.result is not None and self.result.is_obfuscated
