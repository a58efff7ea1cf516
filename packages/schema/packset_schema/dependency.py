"""
Dependency Parsing
==================

Parses dependency lines of the form::

    name [constraint ...] [locator]

where each constraint is ``[operator]version`` (no operator means ``=``) and
the optional trailing locator names the version control system hosting the
dependency, e.g. ``git:github.com/user/repo`` or ``hg:hg.io``.

Examples:
    >>> dep = parse_dependency("name <1.2.3-pre ~3.2.1-dev hg:hg.io")
    >>> dep.name, dep.url
    ('name', 'hg:hg.io')
    >>> str(dep)
    'name <1.2.3-pre ~3.2.1-dev hg:hg.io'
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from packset_common.constants import (
    CONSTRAINT_PATTERN,
    DEPENDENCY_NAME_PATTERN,
    VCS_LOCATOR_PATTERN,
    VCS_SCHEMES,
)
from packset_common.errors import (
    ConstraintFormatError,
    EmptyInputError,
    NameFormatError,
    URLFormatError,
)

from .version import ComparisonOp, Version, parse_op, parse_version

_NAME_RE = re.compile(DEPENDENCY_NAME_PATTERN, re.IGNORECASE | re.ASCII)
_CONSTRAINT_RE = re.compile(CONSTRAINT_PATTERN, re.IGNORECASE | re.ASCII)
_LOCATOR_RE = re.compile(VCS_LOCATOR_PATTERN, re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class Constraint:
    """
    A version constraint like >=1.0.0 or ~2.5.3.

    Attributes:
        operator: Comparison operator
        version: Version the operator compares against
    """

    operator: ComparisonOp
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    def is_satisfied_by(self, version: Version) -> bool:
        """Check if a version satisfies this constraint."""
        return version.satisfies(self.operator, self.version)


def parse_constraint(token: str) -> Constraint:
    """
    Parse a single ``[operator]version`` token.

    Raises:
        EmptyInputError: If the token is empty
        ConstraintFormatError: If the token is not a constraint
        IntegerOverflowError: If a version component is out of range
    """
    if not token:
        raise EmptyInputError()
    match = _CONSTRAINT_RE.fullmatch(token)
    if not match:
        raise ConstraintFormatError(token)
    return _constraint_from_match(token, match)


def _constraint_from_match(token: str, match: "re.Match[str]") -> Constraint:
    op_text = match.group(1) or ""
    operator = parse_op(op_text) if op_text else ComparisonOp.EQ
    return Constraint(operator=operator, version=parse_version(token[len(op_text):]))


@dataclass(frozen=True)
class Dependency:
    """
    A named dependency with optional constraints and version control locator.

    Constraints are combined with logical AND; their order only matters for
    serialization.

    Attributes:
        name: Dependency name
        constraints: Constraints in the order they were written
        url: Version control locator, empty when absent
    """

    name: str
    constraints: Tuple[Constraint, ...] = ()
    url: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _NAME_RE.fullmatch(self.name):
            raise NameFormatError(str(self.name))
        if self.url and not _LOCATOR_RE.fullmatch(self.url):
            raise URLFormatError(self.url)
        if not isinstance(self.constraints, tuple):
            object.__setattr__(self, "constraints", tuple(self.constraints))

    def __str__(self) -> str:
        return self.to_text()

    def to_text(self) -> str:
        """Convert back to a dependency line."""
        parts: List[str] = [self.name]
        parts.extend(str(c) for c in self.constraints)
        if self.url:
            parts.append(self.url)
        return " ".join(parts)

    @classmethod
    def from_text(cls, text: str) -> "Dependency":
        return parse_dependency(text)

    @property
    def scheme(self) -> str:
        """Version control scheme of the locator (git, hg, bzr) or empty string."""
        if not self.url:
            return ""
        return self.url.split(":", 1)[0].lower()

    def satisfied_by(self, version: Version) -> bool:
        """Check a candidate version against every constraint."""
        return all(c.is_satisfied_by(version) for c in self.constraints)

    def filter(self, versions: Iterable[Version]) -> List[Version]:
        """Return the versions that satisfy every constraint, in input order."""
        return [v for v in versions if self.satisfied_by(v)]


def parse_dependency(dep_str: str) -> Dependency:
    """
    Parse a dependency line.

    Args:
        dep_str: Line like "name >=1.2.3 <2.0.0 git:github.com/user/name"

    Returns:
        Dependency object

    Raises:
        EmptyInputError: If the line is empty
        NameFormatError: If the name is invalid
        ConstraintFormatError: If a token is neither a constraint nor a trailing locator
        URLFormatError: If the trailing token has a known scheme but a bad location
        IntegerOverflowError: If a version component is out of range
    """
    if not dep_str:
        raise EmptyInputError()

    name, *tokens = dep_str.split(" ")
    if not _NAME_RE.fullmatch(name):
        raise NameFormatError(name)

    constraints: List[Constraint] = []
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        match = _CONSTRAINT_RE.fullmatch(token)
        if match:
            constraints.append(_constraint_from_match(token, match))
            continue

        # Only the final token may be a locator.
        if i == last:
            if _LOCATOR_RE.fullmatch(token):
                return Dependency(name=name, constraints=tuple(constraints), url=token)
            if token.split(":", 1)[0].lower() in VCS_SCHEMES:
                raise URLFormatError(token)
        raise ConstraintFormatError(token)

    return Dependency(name=name, constraints=tuple(constraints))
