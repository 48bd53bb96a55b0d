"""Test suite for Desc Consts.

Test Structure:
- domain/: Tests for AST traversal, const extraction, serialization and merging
- config/: Tests for configuration management
- infrastructure/: Tests for target architecture detection
- utils/: Tests for const file path helpers
- test_main.py: Command-line tool tests

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run filesystem and CLI tests only
"""

# This file intentionally kept minimal to avoid import issues with pytest
# Individual test modules are discovered automatically by pytest
__version__ = "0.1.0"
