"""
Shared pytest configuration and fixtures for dtokit tests.

This file contains:
- Path setup so tests run against the src layout without installation
- Markers for unit and integration tests
- Fixtures for temporary config directories and a clean process environment
"""

import os
from pathlib import Path
import sys
import tempfile
from unittest.mock import patch

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

INTEGRATION_MODULES = ("test_json_config", "test_env_config")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line(
        "markers", "integration: Tests that touch the file system or process environment"
    )


def pytest_collection_modifyitems(config, items):
    """Mark loader tests as integration tests, everything else as unit tests."""
    for item in items:
        if any(name in str(item.fspath) for name in INTEGRATION_MODULES):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def config_dir():
    """Temporary directory used as the config base directory."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def clean_environ():
    """Process environment restored after the test, whatever it changed."""
    with patch.dict(os.environ, {}, clear=False):
        yield os.environ
