"""Pytest configuration and fixtures for schema tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
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
    - The package directory (packages/schema)
    - The project root
    - Or after pip install
    """
    package_root_str = str(Path(__file__).parent.parent)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


PACK_YAML = """\
name: package
importpath: github.com/user/package/import
version: 1.0.0
summary: Package summary
description: Package Description
homepage: www.package.com
repository:
  type: git
  url: github.com/user/package
license: mit
authors:
- name: Author1
  email: author1@email.com
  homepage: blog.author.com
- name: Author2
  email: author2@email.com
  homepage: blog.author.com
contributors:
- name: Contrib1
  email: contrib@email.com
  homepage: github.com/contrib
support:
  website: support.com
  email: email@support.com
  forum: forum.com
  wiki: wiki.com
  issues: github.com/issues
dependencies:
- dep >1.2.3
- dep2 ~1.4.5-pre !=1.5.0
subpackages:
- subpackage
"""


@pytest.fixture
def full_pack_yaml():
    """Pack document with every field set, in canonical field order"""
    return PACK_YAML


@pytest.fixture
def minimal_pack():
    """Smallest valid pack document"""
    return {
        "importpath": "github.com/user/package",
        "version": "1.0.0",
    }
