"""
packset Pack File Schema v1

Pydantic models for the package metadata document (``pack.yaml``).

Design Principles:
- Pure validation: receives dicts, validates structure, returns typed objects
- No file I/O: reading and writing files is the SDK's responsibility
- Versions and dependencies are bound through their text adapters, so the
  document holds canonical strings and the model holds typed values

Usage:
    from packset_schema import PackSpec

    data = {"name": "package", "importpath": "github.com/user/package", "version": "1.0.0"}
    spec = PackSpec.model_validate(data)
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing_extensions import Self

from packset_common.constants import VCS_SCHEMES

from .adapters import DependencyField, VersionField


class Person(BaseModel):
    """An author or contributor."""

    name: str
    email: Optional[str] = None
    homepage: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class Repository(BaseModel):
    """
    Where the package source lives.

    Examples:
        repository:
          type: git
          url: github.com/user/package
    """

    type: str
    url: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate the version control system is supported"""
        v = v.lower()
        if v not in VCS_SCHEMES:
            raise ValueError(
                f"Unsupported repository type: '{v}'. Supported types: {', '.join(VCS_SCHEMES)}"
            )
        return v


class Support(BaseModel):
    """Support channels for the package."""

    website: Optional[str] = None
    email: Optional[str] = None
    forum: Optional[str] = None
    wiki: Optional[str] = None
    issues: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class PackSpec(BaseModel):
    """
    Package metadata.

    ``name`` defaults to the last segment of ``importpath`` when omitted.
    Field order here is the order fields are written back to YAML.
    """

    name: Optional[str] = None
    importpath: str
    version: VersionField
    summary: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    repository: Optional[Repository] = None
    license: Optional[str] = None
    authors: Optional[List[Person]] = None
    contributors: Optional[List[Person]] = None
    support: Optional[Support] = None
    dependencies: Optional[List[DependencyField]] = None
    subpackages: Optional[List[str]] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("importpath")
    @classmethod
    def validate_importpath(cls, v: str) -> str:
        v = v.strip()
        if not v or v.endswith("/"):
            raise ValueError(f"importpath must be a non-empty path, got '{v}'")
        return v

    @model_validator(mode="after")
    def default_name(self) -> Self:
        if not self.name:
            self.name = self.importpath.rsplit("/", 1)[-1]
        return self

    @model_validator(mode="after")
    def validate_unique_dependencies(self) -> Self:
        """A dependency name may only be listed once."""
        if self.dependencies:
            seen = set()
            for dep in self.dependencies:
                key = dep.name.lower()
                if key in seen:
                    raise ValueError(f"Duplicate dependency: '{dep.name}'")
                seen.add(key)
        return self
