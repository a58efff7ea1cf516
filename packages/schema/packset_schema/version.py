"""
Version Parsing and Comparison
==============================

Semantic versions of the form ``major.minor.patch[-release]`` and the
comparison operators used to constrain them.

Precedence follows http://semver.org/:
- major, minor and patch compare numerically
- a version with a release qualifier is lower than the same version without
- release identifiers compare left to right; numeric identifiers compare as
  integers and are lower than alphanumeric ones, alphanumeric identifiers
  compare byte-wise, and a longer list wins when all shared identifiers match

Usage:
    v = parse_version("1.0.0-alpha.1")
    v.satisfies(ComparisonOp.LT, parse_version("1.0.0"))  # True
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from packset_common.constants import (
    IDENTIFIER_PATTERN,
    MAX_VERSION_COMPONENT,
    NUMBER_PATTERN,
    VERSION_EXPECTED_FORM,
)
from packset_common.errors import (
    EmptyInputError,
    FormatError,
    IntegerOverflowError,
    OperatorFormatError,
)

_CORE_RE = re.compile(
    rf"({NUMBER_PATTERN})\.({NUMBER_PATTERN})\.({NUMBER_PATTERN})(?:-(.+))?",
    re.IGNORECASE | re.ASCII,
)
_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN, re.IGNORECASE | re.ASCII)

_IDENTIFIER_EXPECTED_FORM = "[1-9][0-9]* or [a-z][a-z0-9]*"


class ComparisonOp(str, Enum):
    """Version comparison operators."""

    EQ = "="  # Exact match
    NE = "!="  # Not equal
    GT = ">"  # Greater than
    LT = "<"  # Less than
    GE = ">="  # Greater or equal
    LE = "<="  # Less or equal
    APPROX = "~"  # Greater or equal within the same major.minor family

    def __str__(self) -> str:
        return self.value


def parse_op(token: str) -> ComparisonOp:
    """
    Parse a comparison operator token.

    Args:
        token: One of =, !=, >, <, >=, <=, ~

    Returns:
        ComparisonOp

    Raises:
        OperatorFormatError: If the token is not a known operator
    """
    try:
        return ComparisonOp(token)
    except ValueError:
        raise OperatorFormatError(token) from None


def op_to_text(op: Optional[ComparisonOp]) -> str:
    """Render an operator, or the empty string when it is unset."""
    return op.value if op is not None else ""


def _compare3(a, b) -> int:
    return (a > b) - (a < b)


def _is_numeric(identifier: str) -> bool:
    return identifier.isdigit()


def _compare_identifiers(a: str, b: str) -> int:
    a_num, b_num = _is_numeric(a), _is_numeric(b)
    if a_num and b_num:
        return _compare3(int(a), int(b))
    if a_num:
        return -1
    if b_num:
        return 1
    return _compare3(a.encode(), b.encode())


def compare_releases(base: str, other: str) -> int:
    """
    Compare two release strings by precedence.

    Returns:
        -1, 0 or 1 as ``base`` is lower, equal or higher than ``other``
    """
    if not base and not other:
        return 0
    if not base:
        return 1
    if not other:
        return -1

    base_ids = base.split(".")
    other_ids = other.split(".")
    for a, b in zip(base_ids, other_ids):
        result = _compare_identifiers(a, b)
        if result != 0:
            return result
    return _compare3(len(base_ids), len(other_ids))


# (operator, sign) -> satisfied. Equal precedence implies identical release
# text, so sign 0 is exact equality.
_SATISFIES: Dict[ComparisonOp, Dict[int, bool]] = {
    ComparisonOp.EQ: {-1: False, 0: True, 1: False},
    ComparisonOp.NE: {-1: True, 0: False, 1: True},
    ComparisonOp.GT: {-1: False, 0: False, 1: True},
    ComparisonOp.LT: {-1: True, 0: False, 1: False},
    ComparisonOp.GE: {-1: False, 0: True, 1: True},
    ComparisonOp.LE: {-1: True, 0: True, 1: False},
    ComparisonOp.APPROX: {-1: False, 0: True, 1: True},
}


@dataclass(frozen=True)
class Version:
    """
    Represents a parsed semantic version.

    Examples:
    - 1.0.0
    - 2.1.0-alpha.1
    - 0.0.1-rc.2.build
    """

    major: int
    minor: int = 0
    patch: int = 0
    release: str = ""

    def __post_init__(self) -> None:
        for component in ("major", "minor", "patch"):
            value = getattr(self, component)
            if not isinstance(value, int) or value < 0:
                raise FormatError(str(value), f"non-negative integer {component} version")
            if value > MAX_VERSION_COMPONENT:
                raise IntegerOverflowError(str(value), component)
        if self.release:
            for identifier in self.release.split("."):
                if not _IDENTIFIER_RE.fullmatch(identifier):
                    raise FormatError(identifier, _IDENTIFIER_EXPECTED_FORM)

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self) -> str:
        """Convert version to its canonical string."""
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.release:
            base += f"-{self.release}"
        return base

    @classmethod
    def from_text(cls, text: str) -> "Version":
        return parse_version(text)

    @property
    def release_identifiers(self) -> List[str]:
        return self.release.split(".") if self.release else []

    @property
    def is_prerelease(self) -> bool:
        return bool(self.release)

    def compare(self, other: "Version") -> int:
        """
        Three-way precedence comparison.

        Returns:
            -1, 0 or 1 as this version is lower, equal or higher than ``other``
        """
        result = _compare3(
            (self.major, self.minor, self.patch),
            (other.major, other.minor, other.patch),
        )
        if result != 0:
            return result
        return compare_releases(self.release, other.release)

    def satisfies(self, op: ComparisonOp, other: "Version") -> bool:
        """
        Check that this version satisfies ``op other``.

        Example: 2.0.0 satisfies (LE, 2.1.3).
        The APPROX operator never matches across a major or minor boundary.
        """
        if op is ComparisonOp.APPROX and (self.major, self.minor) != (other.major, other.minor):
            return False
        return _SATISFIES[op][self.compare(other)]

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def _parse_component(text: str, component: str) -> int:
    value = int(text)
    if value > MAX_VERSION_COMPONENT:
        raise IntegerOverflowError(text, component)
    return value


def parse_version(version_str: str) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_str: Version string like "1.0.0" or "2.1.0-alpha.1"

    Returns:
        Version object

    Raises:
        EmptyInputError: If the string is empty
        FormatError: If the string is not major.minor.patch[-release]
        IntegerOverflowError: If a component is out of range
    """
    if not version_str:
        raise EmptyInputError()

    match = _CORE_RE.fullmatch(version_str)
    if not match:
        raise FormatError(version_str, VERSION_EXPECTED_FORM)

    release = match.group(4) or ""
    for identifier in release.split(".") if release else []:
        if not _IDENTIFIER_RE.fullmatch(identifier):
            raise FormatError(version_str, VERSION_EXPECTED_FORM)

    return Version(
        major=_parse_component(match.group(1), "major"),
        minor=_parse_component(match.group(2), "minor"),
        patch=_parse_component(match.group(3), "patch"),
        release=release,
    )
