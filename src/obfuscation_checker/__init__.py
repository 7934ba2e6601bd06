"""Obfuscation checker - identifier-renaming detection for .NET assemblies."""

from .application import ModuleScanner, ObfuscationChecker
from .domain.models import EvaluationResult, FileAnalysis, Severity
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "EvaluationResult",
    "FileAnalysis",
    "ModuleScanner",
    "ObfuscationChecker",
    "Severity",
    "main",
]
