"""Infrastructure configuration module."""

from .application_config import Config
from .scan_config import get_module_extensions, get_scan_config

__all__ = ["Config", "get_module_extensions", "get_scan_config"]
