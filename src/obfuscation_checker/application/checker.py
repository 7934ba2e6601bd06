#!/usr/bin/env python3

"""Obfuscation checker orchestrator (Application Layer).

Wires the heuristics together for one assembly:
- RelatedMemberResolver: sibling sets for the shared-root rule
- NamePatternEvaluator: per-member name rules
- RenamingAggregator: renaming percentage over the catalog
- StructuralSignalDetector: marker attribute and module initializer
- classify: fusion into an EvaluationResult
"""

from pathlib import Path

from ..domain.catalog import MemberCatalog
from ..domain.models import MAX_SHORT_NAME_LENGTH, EvaluationResult, FileAnalysis
from ..domain.services import (
    NamePatternEvaluator,
    RelatedMemberResolver,
    RenamingAggregator,
    StructuralSignalDetector,
    classify,
)
from ..exceptions import MalformedModuleError
from ..infrastructure.dotnet_catalog import DotNetMemberCatalog
from ..infrastructure.logging import get_logger, log_timing

logger = get_logger(__name__)


class ObfuscationChecker:
    """Evaluates assemblies for identifier-renaming obfuscation.

    The checker holds no per-assembly state: every call builds its own
    resolver and evaluator and returns a fresh result.
    """

    def __init__(self, max_name_length: int = MAX_SHORT_NAME_LENGTH):
        """Initialize checker.

        Args:
            max_name_length: Short-name threshold handed to the name evaluator
        """
        self.max_name_length = max_name_length

    def evaluate(self, catalog: MemberCatalog) -> EvaluationResult:
        """Run all heuristics over one catalog.

        Args:
            catalog: Members and attributes of the assembly

        Returns:
            Evaluation result for the assembly
        """
        resolver = RelatedMemberResolver(catalog)
        evaluator = NamePatternEvaluator(resolver, max_name_length=self.max_name_length)

        renaming_percentage = RenamingAggregator(evaluator).renaming_percentage(catalog)
        has_marker_attribute = StructuralSignalDetector.has_marker_attribute(catalog)
        has_initializer = StructuralSignalDetector.has_synthetic_initializer(catalog)

        result = classify(renaming_percentage, has_marker_attribute, has_initializer)
        logger.debug(
            f"{catalog.name}: renaming={renaming_percentage:.3f} "
            f"marker={has_marker_attribute} initializer={has_initializer} -> {result.severity}"
        )
        return result

    @log_timing
    def analyze_file(self, path: Path) -> FileAnalysis:
        """Analyze one module file.

        Never raises: files that are not .NET modules come back SKIPPED and
        any other failure comes back FAILED with its message.

        Args:
            path: Path to a .dll or .exe file

        Returns:
            Explicit outcome of the analysis
        """
        try:
            catalog = DotNetMemberCatalog.open(path)
            result = self.evaluate(catalog)
        except MalformedModuleError as e:
            logger.debug(f"Skipping {path}: {e.reason}")
            return FileAnalysis.skipped(path, e.reason)
        except Exception as e:
            logger.debug(f"Analysis of {path} failed: {e}")
            return FileAnalysis.failed(path, str(e))

        return FileAnalysis.analyzed(path, catalog.name, result)


def analyze_file_worker(args: tuple[Path, int]) -> FileAnalysis:
    """Worker function for parallel scans.

    Args:
        args: Tuple of (path, max_name_length)

    Returns:
        Outcome of analyzing the file
    """
    path, max_name_length = args
    return ObfuscationChecker(max_name_length=max_name_length).analyze_file(path)
