"""Pytest configuration and fixtures for SDK tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import os
import subprocess
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers and path setup."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "requires_git: marks tests that run the real git binary"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/sdk-python)
    - The project root
    - Or after pip install
    """
    package_root_str = str(Path(__file__).parent.parent)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


def pytest_collection_modifyitems(config, items):
    """Skip tests that need git when it is not installed."""
    try:
        subprocess.run(["git", "--version"], capture_output=True, timeout=5, check=True)
        has_git = True
    except (FileNotFoundError, subprocess.CalledProcessError, subprocess.TimeoutExpired):
        has_git = False

    for item in items:
        if "requires_git" in item.keywords and not has_git:
            item.add_marker(pytest.mark.skip(reason="git not installed"))


@pytest.fixture
def pack_yaml():
    return (
        "name: package\n"
        "importpath: github.com/user/package\n"
        "version: 1.0.0\n"
        "dependencies:\n"
        "- dep >1.2.3\n"
        "- dep2 ~1.4.5-pre !=1.5.0 git:github.com/user/dep2\n"
    )


@pytest.fixture
def pack_file(tmp_path, pack_yaml):
    """A pack.yaml written to a temporary directory"""
    path = tmp_path / "pack.yaml"
    path.write_text(pack_yaml)
    return path


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Two workspace roots exported through PACKSET_PATH."""
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    monkeypatch.setenv("PACKSET_PATH", f"{first}{os.pathsep}{second}")
    monkeypatch.delenv("PACKSET_PACKSET", raising=False)
    return first, second
