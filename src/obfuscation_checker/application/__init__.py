#!/usr/bin/env python3

"""Application layer: single-file analysis, scanning and reporting."""

from .checker import ObfuscationChecker
from .report import format_report, print_report
from .scanner import ModuleScanner, ScanSummary

__all__ = [
    "ModuleScanner",
    "ObfuscationChecker",
    "ScanSummary",
    "format_report",
    "print_report",
]
