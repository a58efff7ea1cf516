"""
Text Adapters
=============

Version and Dependency expose exactly two hooks to document serializers:
``to_text()`` producing the canonical string and ``from_text(text)``
building a value from a string. The two are inverses for every value the
parsers produce.

``text_field`` turns any such type into a Pydantic annotated type so
document models can declare ``version: VersionField`` and get parsing on
input and canonical strings on output.
"""

from typing import Any, Callable, Type, TypeVar

from pydantic import PlainSerializer, PlainValidator
from typing_extensions import Annotated, Protocol, runtime_checkable

from .dependency import Dependency
from .version import Version

T = TypeVar("T", bound="TextAdapter")


@runtime_checkable
class TextAdapter(Protocol):
    """Values that round-trip through a canonical string."""

    def to_text(self) -> str: ...

    @classmethod
    def from_text(cls: Type[T], text: str) -> T: ...


def _validator(cls: Type[T]) -> Callable[[Any], T]:
    def validate(value: Any) -> T:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} must be a string, got {type(value).__name__}")
        return cls.from_text(value)

    return validate


def text_field(cls: Type[T]) -> Any:
    """Build a Pydantic annotated type backed by ``cls.from_text`` / ``to_text``."""
    return Annotated[
        cls,
        PlainValidator(_validator(cls)),
        PlainSerializer(lambda value: value.to_text(), return_type=str),
    ]


VersionField = text_field(Version)
DependencyField = text_field(Dependency)
