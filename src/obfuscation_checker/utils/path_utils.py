"""Path utilities for locating module files."""

from collections.abc import Iterable
from pathlib import Path


def is_module_file(path: Path, extensions: Iterable[str]) -> bool:
    """Check whether a path has one of the module extensions (case-insensitive)."""
    return path.suffix.lower() in {ext.lower() for ext in extensions}


def find_module_files(directory: Path, extensions: Iterable[str]) -> list[Path]:
    """Recursively list module files below a directory, sorted by path."""
    extensions = frozenset(ext.lower() for ext in extensions)
    return sorted(
        path
        for path in directory.rglob("*")
        if path.is_file() and path.suffix.lower() in extensions
    )
