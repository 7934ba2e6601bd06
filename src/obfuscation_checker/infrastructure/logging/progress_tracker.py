#!/usr/bin/env python3

"""Progress tracking for scans over many modules."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Track and report scan progress with summary statistics.

    Counts analyzed, skipped and obfuscated files and times the high-level
    operations of a scan.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.file_count = 0
        self.skipped_count = 0
        self.obfuscated_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.debug(f"Aborted operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def count_file(self, skipped: bool = False, obfuscated: bool = False) -> None:
        """Record one processed file."""
        self.file_count += 1
        if skipped:
            self.skipped_count += 1
        if obfuscated:
            self.obfuscated_count += 1

    def report_summary(self) -> None:
        """Report final scan statistics."""
        total_time = time() - self.start_time
        rate = self.file_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Scan complete: {self.file_count} files, {self.obfuscated_count} obfuscated, "
            f"{self.skipped_count} skipped in {total_time:.2f}s ({rate:.1f} files/s)"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " -> ".join(op[0] for op in self.operation_stack)

    def log_memory_usage(self) -> None:
        """Log resident memory of the current process."""
        try:
            memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.debug(f"Could not get memory usage: {e}")
            return
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.file_count = 0
        self.skipped_count = 0
        self.obfuscated_count = 0
        self.operation_stack.clear()
