#!/usr/bin/env python3

"""Scanning of single files and directory trees.

Each file is analyzed independently. Large directory scans can be spread
over a process pool, one task per file; results come back in file order and
are merged by counting.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from multiprocessing import Pool
from pathlib import Path

from ..domain.models import AnalysisStatus, FileAnalysis
from ..exceptions import AnalysisError
from ..infrastructure.config import get_module_extensions, get_scan_config
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing
from ..utils.path_utils import find_module_files
from .checker import ObfuscationChecker, analyze_file_worker

logger = get_logger(__name__)

ResultCallback = Callable[[FileAnalysis], None]


@dataclass
class ScanSummary:
    """Outcome of a scan over one or more files."""

    files: list[Path] = field(default_factory=list)
    analyses: list[FileAnalysis] = field(default_factory=list)

    @property
    def obfuscated_count(self) -> int:
        return sum(1 for analysis in self.analyses if analysis.is_obfuscated)

    @property
    def skipped_count(self) -> int:
        return sum(1 for analysis in self.analyses if analysis.status is AnalysisStatus.SKIPPED)

    @property
    def analyzed(self) -> list[FileAnalysis]:
        return [a for a in self.analyses if a.status is AnalysisStatus.ANALYZED]


class ModuleScanner:
    """Runs the obfuscation checker over a file or a directory tree."""

    def __init__(self, checker: ObfuscationChecker | None = None, max_workers: int = 1):
        """Initialize scanner.

        Args:
            checker: Checker to run (default: ObfuscationChecker())
            max_workers: Worker processes for directory scans; 1 is sequential
        """
        self.checker = checker or ObfuscationChecker()
        self.max_workers = max_workers
        self.scan_config = get_scan_config()
        self.tracker = ProgressTracker(logger)

    @log_timing
    def scan(self, target: Path, on_result: ResultCallback | None = None) -> ScanSummary:
        """Scan a module file or every module file below a directory.

        Args:
            target: File or directory
            on_result: Called with each ANALYZED outcome, in file order

        Returns:
            Summary of all outcomes

        Raises:
            AnalysisError: On the first file whose analysis failed unexpectedly
            FileNotFoundError: If the target does not exist
        """
        if not target.exists():
            raise FileNotFoundError(f"Path not found: {target}")

        self.tracker.reset()

        if target.is_dir():
            with self.tracker.track_operation(f"discover {target}"):
                files = find_module_files(target, get_module_extensions())
            logger.info(f"Found {len(files)} module files in {target}")
        else:
            files = [target]

        summary = ScanSummary(files=files)
        with self.tracker.track_operation(f"scan {target}"):
            if self._use_pool(files):
                self._scan_parallel(files, summary, on_result)
            else:
                self._scan_sequential(files, summary, on_result)

        self.tracker.report_summary()
        if self.scan_config["LOG_MEMORY_USAGE"]:
            self.tracker.log_memory_usage()
        return summary

    def _use_pool(self, files: list[Path]) -> bool:
        return self.max_workers > 1 and len(files) >= self.scan_config["PARALLEL_MIN_FILES"]

    def _scan_sequential(
        self, files: list[Path], summary: ScanSummary, on_result: ResultCallback | None
    ) -> None:
        for path in files:
            self._record(self.checker.analyze_file(path), summary, on_result)

    def _scan_parallel(
        self, files: list[Path], summary: ScanSummary, on_result: ResultCallback | None
    ) -> None:
        workers = min(self.max_workers, len(files))
        logger.debug(f"Scanning {len(files)} files with {workers} workers")

        tasks = [(path, self.checker.max_name_length) for path in files]
        # Leaving the block terminates outstanding tasks when a file fails
        with Pool(processes=workers) as pool:
            for analysis in pool.imap(
                analyze_file_worker, tasks, chunksize=self.scan_config["POOL_CHUNK_SIZE"]
            ):
                self._record(analysis, summary, on_result)

    def _record(
        self, analysis: FileAnalysis, summary: ScanSummary, on_result: ResultCallback | None
    ) -> None:
        if analysis.status is AnalysisStatus.FAILED:
            message = analysis.error or "analysis failed"
            logger.error(
                f"Analysis of {analysis.path} failed during "
                f"{self.tracker.get_current_context()}: {message}"
            )
            raise AnalysisError(analysis.path, message)

        summary.analyses.append(analysis)
        self.tracker.count_file(
            skipped=analysis.status is AnalysisStatus.SKIPPED,
            obfuscated=analysis.is_obfuscated,
        )

        if analysis.status is AnalysisStatus.ANALYZED and on_result is not None:
            on_result(analysis)
