"""Utilities module initialization."""

from .path_utils import find_module_files, is_module_file

__all__ = [
    "find_module_files",
    "is_module_file",
]
