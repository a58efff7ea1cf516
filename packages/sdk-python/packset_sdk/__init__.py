"""
packset SDK

File system and version control operations built on packset_schema:
- Pack file loading and writing
- Workspace path discovery
- git / hg / bzr helpers and tag selection
"""

from .dvcs import (
    DVCS,
    Bzr,
    Git,
    Hg,
    checkout_matching,
    dvcs_for,
    is_version_tag,
    remote_location,
    select_tag,
)
from .packfile import find_pack_file, load_pack, parse_pack, write_pack, write_pack_to
from .utils.workspace import Paths, dir_exists, ensure_directory, try_uri_parse

__version__ = "0.1.0"

__all__ = [
    # Pack files
    "load_pack",
    "parse_pack",
    "write_pack",
    "write_pack_to",
    "find_pack_file",
    # Workspace
    "Paths",
    "dir_exists",
    "ensure_directory",
    "try_uri_parse",
    # Version control
    "DVCS",
    "Git",
    "Hg",
    "Bzr",
    "dvcs_for",
    "remote_location",
    "select_tag",
    "checkout_matching",
    "is_version_tag",
]
