"""Pytest configuration and fixtures for common-py tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import io
import logging
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers and path setup."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/common-py)
    - The project root
    - Or after pip install
    """
    package_root_str = str(Path(__file__).parent.parent)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PACKSET_* variable for the duration of a test."""
    import os

    for key in list(os.environ):
        if key.startswith("PACKSET_"):
            monkeypatch.delenv(key)
    yield monkeypatch


@pytest.fixture
def log_stream():
    """Capture packset log output, restoring the root logger afterwards."""
    root = logging.getLogger("packset")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    stream = io.StringIO()
    yield stream
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate
