"""
Workspace Utilities Module
==========================

Locates the directories packset works with:
- The workspace roots, listed in ``PACKSET_PATH`` (os.pathsep separated)
- The packset home (``<first root>/packset``) and its ``config.yaml``
- The active packset's source folder (``<home>/<packset>/src``)
- The combined search path (roots followed by the packset source folder)
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union
from urllib.parse import SplitResult, urlsplit

from packset_common.config import Settings, get_settings
from packset_common.constants import (
    CONFIG_FILE,
    DEFAULT_PACKSET,
    ENV_PATH,
    PACKSET_HOME_FOLDER,
    SRC_FOLDER,
)
from packset_common.errors import ValidationError, WorkspaceError
from packset_common.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


# ============================================================================
# Paths
# ============================================================================


class Paths:
    """
    All the paths used by packset.

    Args:
        root: One or more workspace roots joined with os.pathsep
        packset: Name of the active packset

    Raises:
        WorkspaceError: If no root is given
    """

    def __init__(self, root: str, packset: str = DEFAULT_PACKSET):
        if not root:
            raise WorkspaceError(f"{ENV_PATH} must be set to use this tool.")
        self.root = root
        self.roots: List[Path] = [Path(p) for p in root.split(os.pathsep) if p]
        if not self.roots:
            raise WorkspaceError(f"{ENV_PATH} does not contain any directory: '{root}'")
        self.home_path = self.roots[0] / PACKSET_HOME_FOLDER
        self.config_path = self.home_path / CONFIG_FILE
        self.set_packset(packset)

    @classmethod
    def from_env(cls, packset: Optional[str] = None, settings: Optional[Settings] = None) -> "Paths":
        """Build paths from ``PACKSET_PATH`` and ``PACKSET_PACKSET``."""
        settings = settings or get_settings()
        return cls(settings.path or "", packset or settings.packset)

    @property
    def packset(self) -> str:
        return self._packset

    def set_packset(self, packset: str) -> None:
        """Switch the active packset and update every path that depends on it."""
        if not packset:
            raise WorkspaceError("Packset name must not be empty.")
        self._packset = packset
        self.packset_path = self.home_path / packset / SRC_FOLDER
        self.combined_path = f"{self.root}{os.pathsep}{self.packset_path}"

    def activate(self) -> None:
        """Point ``PACKSET_PATH`` at the combined search path."""
        os.environ[ENV_PATH] = self.combined_path
        logger.debug("Activated packset", packset=self._packset, path=self.combined_path)

    def restore(self) -> None:
        """Restore ``PACKSET_PATH`` to the original roots."""
        os.environ[ENV_PATH] = self.root

    @contextmanager
    def activated(self) -> Iterator["Paths"]:
        self.activate()
        try:
            yield self
        finally:
            self.restore()

    def package_exists(self, import_path: str) -> Tuple[Optional[Path], bool]:
        """
        Look for a package in the roots, then in the packset.

        Args:
            import_path: Package import path, e.g. 'github.com/user/package'

        Returns:
            Tuple of (package path or None, whether it was found in the packset)
        """
        for root in self.roots:
            package_path = root / SRC_FOLDER / import_path
            if dir_exists(package_path):
                return package_path, False

        package_path = self.packset_path / import_path
        if dir_exists(package_path):
            return package_path, True

        return None, False

    def __repr__(self) -> str:
        return f"Paths(root={self.root!r}, packset={self._packset!r})"


# ============================================================================
# Directory helpers
# ============================================================================


def dir_exists(directory: PathLike) -> bool:
    """
    Check that a directory exists.

    Raises:
        WorkspaceError: If the path exists but is not a directory
    """
    path = Path(directory)
    if not path.exists():
        return False
    if not path.is_dir():
        raise WorkspaceError(f"Expected {path} to be dir, but found file.")
    return True


def ensure_directory(directory: PathLike) -> bool:
    """
    Make sure a directory exists, creating it when missing.

    Returns:
        True if the directory had to be created
    """
    if dir_exists(directory):
        return False
    Path(directory).mkdir(mode=0o770, parents=True, exist_ok=True)
    logger.debug("Created directory", path=str(directory))
    return True


def try_uri_parse(path_or_url: str) -> Optional[SplitResult]:
    """
    Classify a location as an absolute path or an absolute URL.

    Returns:
        None for an absolute filesystem path, the parsed URL otherwise

    Raises:
        ValidationError: If the location is neither
    """
    if os.path.isabs(path_or_url):
        return None
    parsed = urlsplit(path_or_url)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise ValidationError(f'Expected "{path_or_url}", to be an absolute path or url.')
    return parsed


__all__ = [
    "Paths",
    "dir_exists",
    "ensure_directory",
    "try_uri_parse",
]
