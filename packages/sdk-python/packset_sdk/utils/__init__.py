"""
packset SDK Utilities
"""

from .workspace import Paths, dir_exists, ensure_directory, try_uri_parse

__all__ = [
    "Paths",
    "dir_exists",
    "ensure_directory",
    "try_uri_parse",
]
