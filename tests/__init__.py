"""Test suite for the obfuscation checker.

Test Structure:
- domain/: Tests for the name heuristics, catalogs and classification
- infrastructure/: Tests for the dnfile catalog, logging
- config/: Tests for configuration management
- application/: Tests for single-file analysis, scanning and reports
- utils/: Tests for utility functions
- test_main.py: Command line behaviour and exit codes

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m "not integration"
"""

# This file intentionally kept minimal to avoid import issues with pytest
# Individual test modules are discovered automatically by pytest
__version__ = "0.1.0"
