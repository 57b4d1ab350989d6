"""
Pytest configuration and shared fixtures for nullbool tests.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_dir(temp_dir):
    """Create a temporary config directory."""
    config_dir = temp_dir / ".config" / "nullbool"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def config_file(config_dir):
    """Temporary config file path (not created)."""
    return config_dir / "config.toml"
