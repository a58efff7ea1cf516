"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner


def pytest_configure(config):
    """Configure pytest with custom markers and path setup."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/cli)
    - The project root
    - Or after pip install
    """
    package_root_str = str(Path(__file__).parent.parent)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_pack_file(tmp_path):
    """Create a sample pack.yaml for testing."""
    content = """name: package
importpath: github.com/user/package
version: 1.0.0
dependencies:
- dep >1.2.3
- dep2 ~1.4.5-pre !=1.5.0
"""
    pack_file = tmp_path / "pack.yaml"
    pack_file.write_text(content)
    return str(pack_file)


@pytest.fixture
def invalid_pack_file(tmp_path):
    """Pack file whose version has a leading zero."""
    pack_file = tmp_path / "pack.yaml"
    pack_file.write_text("importpath: github.com/user/package\nversion: 1.0.01\n")
    return str(pack_file)
