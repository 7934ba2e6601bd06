"""Exceptions raised by the obfuscation checker."""

from pathlib import Path


class ObfuscationCheckerError(Exception):
    """Base class for checker errors."""


class MalformedModuleError(ObfuscationCheckerError):
    """File is not a readable .NET module (not a PE, no CLI metadata, or corrupt metadata)."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class AnalysisError(ObfuscationCheckerError):
    """Unexpected failure while analyzing a file."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class UsageError(ObfuscationCheckerError):
    """Command line could not be parsed."""
