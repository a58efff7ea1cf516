"""
Version Control Helpers
=======================

Drives the ``git``, ``hg`` and ``bzr`` command line tools to clone, update
and check out dependency repositories and to read their version tags.

Every operation runs one external process synchronously with a timeout and
raises RepositoryError on failure. Only tags that are plain version literals
(``major.minor.patch[-release]``) are reported.

Usage:
    repo = dvcs_for(dependency, Path("/work/src/name"))
    repo.clone(remote_location(dependency))
    tag = checkout_matching(repo, dependency)
"""

import re
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Type, Union

from packset_common.config import get_settings
from packset_common.constants import DEFAULT_VCS_TIMEOUT, VERSION_PATTERN
from packset_common.errors import EmptyInputError, FormatError, IntegerOverflowError, RepositoryError
from packset_common.logger import get_logger
from packset_schema import Dependency, Version, parse_version

from .utils.workspace import dir_exists, ensure_directory

logger = get_logger(__name__)

_TAG_RE = re.compile(VERSION_PATTERN, re.IGNORECASE | re.ASCII)
# `git describe` prints <tag>-<commits>-g<sha> when HEAD is past the tag.
_GIT_DESCRIBE_RE = re.compile(r"-[0-9]+-g[0-9a-f]+\s*$")
_GIT_NO_TAGS = "No names found"


def is_version_tag(tag: str) -> bool:
    return bool(_TAG_RE.fullmatch(tag))


class DVCS(ABC):
    """
    A distributed version control system bound to one repository directory.

    Args:
        repository: Location of the working copy
        timeout: Seconds allowed for each command
    """

    scheme: str = ""
    binary: str = ""

    def __init__(self, repository: Union[str, Path], timeout: float = DEFAULT_VCS_TIMEOUT):
        self.repository = Path(repository)
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.repository)!r})"

    def _run(self, args: List[str], in_repo: bool = True, check: bool = True) -> subprocess.CompletedProcess:
        cmd = [self.binary, *args]
        cwd = self.repository if in_repo else None
        logger.debug("Running version control command", command=" ".join(cmd), cwd=str(cwd or ""))
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RepositoryError(f"{self.binary} is not installed or not on PATH", cmd) from e
        except subprocess.TimeoutExpired as e:
            raise RepositoryError(f"{self.binary} timed out after {self.timeout}s", cmd) from e

        if check and result.returncode != 0:
            raise RepositoryError(
                f"{self.binary} {args[0]} failed with exit code {result.returncode}",
                cmd,
                (result.stderr or "").strip(),
            )
        return result

    def repo_exists(self) -> bool:
        return dir_exists(self.repository)

    def _require_repo(self) -> None:
        if not self.repo_exists():
            raise RepositoryError(f'Repo "{self.repository}" does not exist.')

    def set_repo_path(self, path: Union[str, Path]) -> None:
        """Override the repository location given on creation."""
        self.repository = Path(path)

    @abstractmethod
    def status(self) -> None:
        """Check there is a usable repository at this location."""

    @abstractmethod
    def clone(self, url: str) -> None:
        """Clone ``url`` into the repository location unless it already exists."""

    @abstractmethod
    def update(self) -> None:
        """Pull changes from the default remote."""

    @abstractmethod
    def checkout(self, version: str) -> None:
        """Change the working copy to ``version``."""

    @abstractmethod
    def tags(self) -> List[str]:
        """List version tags."""

    @abstractmethod
    def current_tag(self) -> str:
        """Return the tag of the working copy, or empty string if none."""


class Git(DVCS):
    """git implementation."""

    scheme = "git"
    binary = "git"

    def status(self) -> None:
        self._require_repo()
        self._run(["status"])

    def clone(self, url: str) -> None:
        if self.repo_exists():
            return
        ensure_directory(self.repository.parent)
        logger.info("Cloning repository", url=url, path=str(self.repository))
        self._run(["clone", url, str(self.repository)], in_repo=False)

    def update(self) -> None:
        self._require_repo()
        self._run(["fetch"])

    def checkout(self, version: str) -> None:
        self._require_repo()
        self._run(["checkout", version])

    def tags(self) -> List[str]:
        self._require_repo()
        output = self._run(["tag", "-l"]).stdout
        return [line for line in output.splitlines() if line and is_version_tag(line)]

    def current_tag(self) -> str:
        self._require_repo()
        result = self._run(["describe", "--tags"], check=False)
        if result.returncode != 0:
            if _GIT_NO_TAGS in (result.stderr or ""):
                return ""
            raise RepositoryError(
                f"git describe failed with exit code {result.returncode}",
                ["git", "describe", "--tags"],
                (result.stderr or "").strip(),
            )
        output = result.stdout or ""
        if not output.strip() or _GIT_DESCRIBE_RE.search(output):
            return ""
        return output.strip()


class Hg(DVCS):
    """Mercurial implementation."""

    scheme = "hg"
    binary = "hg"

    def status(self) -> None:
        self._require_repo()
        self._run(["status"])

    def clone(self, url: str) -> None:
        if self.repo_exists():
            return
        ensure_directory(self.repository.parent)
        logger.info("Cloning repository", url=url, path=str(self.repository))
        self._run(["clone", url, str(self.repository)], in_repo=False)

    def update(self) -> None:
        self._require_repo()
        self._run(["pull"])

    def checkout(self, version: str) -> None:
        self._require_repo()
        self._run(["checkout", version])

    def tags(self) -> List[str]:
        self._require_repo()
        output = self._run(["tags"]).stdout
        tags = []
        for line in output.splitlines():
            fields = line.split()
            if fields and is_version_tag(fields[0]):
                tags.append(fields[0])
        return tags

    def current_tag(self) -> str:
        self._require_repo()
        fields = self._run(["identify"]).stdout.split()
        # "<node> <tag>/<tag>..." ; no second field means no tags
        if len(fields) < 2:
            return ""
        for tag in fields[1].split("/"):
            if tag and is_version_tag(tag):
                return tag
        return ""


class Bzr(DVCS):
    """Bazaar implementation. Only status checks are supported."""

    scheme = "bzr"
    binary = "bzr"

    def _not_implemented(self, operation: str) -> RepositoryError:
        return RepositoryError(f"bzr: {operation} is not implemented")

    def status(self) -> None:
        self._require_repo()
        self._run(["status"])

    def clone(self, url: str) -> None:
        if self.repo_exists():
            return
        raise self._not_implemented("clone")

    def update(self) -> None:
        self._require_repo()
        raise self._not_implemented("update")

    def checkout(self, version: str) -> None:
        self._require_repo()
        raise self._not_implemented("checkout")

    def tags(self) -> List[str]:
        self._require_repo()
        raise self._not_implemented("tags")

    def current_tag(self) -> str:
        self._require_repo()
        raise self._not_implemented("current_tag")


DVCS_TYPES: Dict[str, Type[DVCS]] = {
    Git.scheme: Git,
    Hg.scheme: Hg,
    Bzr.scheme: Bzr,
}


def dvcs_for(
    source: Union[Dependency, str],
    repository: Union[str, Path],
    timeout: Optional[float] = None,
) -> DVCS:
    """
    Create the DVCS matching a dependency locator or a scheme name.

    ``timeout`` defaults to ``PACKSET_VCS_TIMEOUT`` from the settings.

    Raises:
        RepositoryError: If the scheme is missing or unknown
    """
    scheme = source.scheme if isinstance(source, Dependency) else source.split(":", 1)[0].lower()
    dvcs_type = DVCS_TYPES.get(scheme)
    if dvcs_type is None:
        raise RepositoryError(
            f"Unknown version control system '{scheme}', expected one of: {', '.join(DVCS_TYPES)}"
        )
    if timeout is None:
        timeout = get_settings().vcs_timeout
    return dvcs_type(repository, timeout=timeout)


def remote_location(dependency: Dependency) -> str:
    """
    The location part of a dependency locator (after ``scheme:``).

    Raises:
        RepositoryError: If the dependency has no location to clone from
    """
    _, _, location = dependency.url.partition(":")
    if not location:
        raise RepositoryError(f"Dependency '{dependency.name}' has no repository location")
    return location


def select_tag(tags: Iterable[str], dependency: Dependency) -> Optional[str]:
    """
    Pick the highest tag satisfying all of a dependency's constraints.

    Tags that are not version literals are ignored.
    """
    best: Optional[Version] = None
    best_tag: Optional[str] = None
    for tag in tags:
        try:
            version = parse_version(tag)
        except (EmptyInputError, FormatError, IntegerOverflowError):
            continue
        if dependency.satisfied_by(version) and (best is None or version > best):
            best, best_tag = version, tag
    return best_tag


def checkout_matching(repo: DVCS, dependency: Dependency) -> Optional[str]:
    """
    Check out the highest tag matching ``dependency``.

    Returns:
        The tag checked out, or None when no tag matches
    """
    tag = select_tag(repo.tags(), dependency)
    if tag is None:
        logger.warning("No tag satisfies dependency", dependency=str(dependency))
        return None
    repo.checkout(tag)
    logger.info("Checked out tag", dependency=dependency.name, tag=tag)
    return tag
