"""
Pack File Serialization
=======================

Conversions between PackSpec and plain dicts / YAML strings.

- to_dict(): PackSpec -> dict with canonical version and dependency strings
- from_dict(): dict -> PackSpec, raising packset ValidationError on failure
- to_yaml_string() / from_yaml_string(): the same through YAML text

Unset optional fields are omitted so a document survives a round trip
unchanged.
"""

from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from packset_common.errors import ValidationError

from .pack_v1 import PackSpec


def _format_pydantic_error(e: PydanticValidationError) -> str:
    lines = []
    for err in e.errors():
        location = ".".join(str(part) for part in err["loc"]) or "pack"
        lines.append(f"{location}: {err['msg']}")
    return "Invalid pack file:\n  " + "\n  ".join(lines)


def to_dict(spec: PackSpec) -> Dict[str, Any]:
    """
    Convert a PackSpec to a plain dict.

    Args:
        spec: Validated pack metadata

    Returns:
        Dict containing only the fields that are set
    """
    return spec.model_dump(mode="json", exclude_none=True)


def from_dict(data: Dict[str, Any]) -> PackSpec:
    """
    Validate a dict into a PackSpec.

    Raises:
        ValidationError: If the dict is not a valid pack document
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Pack file must be a mapping, got {type(data).__name__}")
    try:
        return PackSpec.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_format_pydantic_error(e)) from e


def to_yaml_string(spec: PackSpec) -> str:
    """Render a PackSpec as YAML, keeping the model's field order."""
    return yaml.safe_dump(
        to_dict(spec),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def from_yaml_string(content: str) -> PackSpec:
    """
    Parse YAML text into a PackSpec.

    Raises:
        ValidationError: If the YAML is malformed or the document is invalid
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in pack file: {e}") from e
    return from_dict(data)
