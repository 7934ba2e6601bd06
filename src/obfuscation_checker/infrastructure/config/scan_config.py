#!/usr/bin/env python3

"""Configuration for directory scanning."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Extensions of files treated as .NET modules (case-insensitive)
    "MODULE_EXTENSIONS": ".dll,.exe",

    # Directory scans with fewer files than this stay sequential
    "PARALLEL_MIN_FILES": 8,

    # Worker pool chunk size
    "POOL_CHUNK_SIZE": 4,

    # Log memory usage after each directory scan
    "LOG_MEMORY_USAGE": True,
}


def get_scan_config() -> dict:
    """Get configuration with environment variable overrides.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    # Override with environment variables
    for key in config:
        env_value = os.getenv(f"CHECKER_{key}")
        if env_value is not None:
            # Convert to appropriate type
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(config[key], int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    pass
            else:
                config[key] = env_value

    return config


def get_module_extensions() -> frozenset[str]:
    """Lowercase module extensions, each with a leading dot."""
    raw = get_scan_config()["MODULE_EXTENSIONS"]
    extensions = set()
    for ext in raw.split(","):
        ext = ext.strip().lower()
        if not ext:
            continue
        extensions.add(ext if ext.startswith(".") else f".{ext}")
    return frozenset(extensions)
