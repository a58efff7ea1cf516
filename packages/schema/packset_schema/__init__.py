"""
packset Schema Package

Versions, dependency lines and the pack file document model.

Usage:
    from packset_schema import parse_version, parse_dependency, ComparisonOp

    dep = parse_dependency("name >=1.2.0 <2.0.0 git:github.com/user/name")
    dep.satisfied_by(parse_version("1.4.2"))  # True
"""

from packset_common.errors import (
    ConstraintFormatError,
    EmptyInputError,
    FormatError,
    IntegerOverflowError,
    NameFormatError,
    OperatorFormatError,
    URLFormatError,
    ValidationError,
)

from .version import (
    ComparisonOp,
    Version,
    compare_releases,
    op_to_text,
    parse_op,
    parse_version,
)
from .dependency import (
    Constraint,
    Dependency,
    parse_constraint,
    parse_dependency,
)
from .adapters import DependencyField, TextAdapter, VersionField, text_field
from .pack_v1 import PackSpec, Person, Repository, Support
from .serialization import from_dict, from_yaml_string, to_dict, to_yaml_string

__version__ = "0.1.0"

__all__ = [
    # Versions
    "ComparisonOp",
    "Version",
    "compare_releases",
    "op_to_text",
    "parse_op",
    "parse_version",
    # Dependencies
    "Constraint",
    "Dependency",
    "parse_constraint",
    "parse_dependency",
    # Text adapters
    "TextAdapter",
    "text_field",
    "VersionField",
    "DependencyField",
    # Pack file model
    "PackSpec",
    "Person",
    "Repository",
    "Support",
    # Serialization
    "to_dict",
    "from_dict",
    "to_yaml_string",
    "from_yaml_string",
    # Errors
    "EmptyInputError",
    "FormatError",
    "NameFormatError",
    "ConstraintFormatError",
    "URLFormatError",
    "IntegerOverflowError",
    "OperatorFormatError",
    "ValidationError",
]
