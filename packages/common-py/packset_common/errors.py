"""
packset Error Classes

All packset packages raise errors from this module so callers can handle
failures consistently. Every error carries a machine readable ``code`` and a
human readable ``message``.

Parsing errors (``EmptyInputError``, the ``FormatError`` family,
``IntegerOverflowError`` and ``OperatorFormatError``) also derive from
``ValueError`` so they surface as field errors inside Pydantic validators.

Usage:
    from packset_common.errors import FormatError

    try:
        parse_version("4.2.01")
    except FormatError as e:
        print(e.value, e.expected)
"""

from typing import Any, Dict, Optional


class PacksetError(Exception):
    """Base class for all packset errors."""

    code = "PACKSET_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for CLI or log output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }


# =============================================================================
# PARSING ERRORS
# =============================================================================


class EmptyInputError(PacksetError, ValueError):
    """Raised when a string that must be parsed has zero length."""

    code = "EMPTY_INPUT"

    def __init__(self, message: str = "packset: string must not be empty"):
        super().__init__(message)


class FormatError(PacksetError, ValueError):
    """
    Raised when a string does not match the expected grammar.

    Attributes:
        value: The rejected string or token
        expected: Description of the expected form
    """

    code = "FORMAT_ERROR"

    def __init__(self, value: str, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"packset: [{value}] must be in the form: {expected}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["value"] = self.value
        data["expected"] = self.expected
        return data


class NameFormatError(FormatError):
    """Raised when a dependency name is invalid."""

    def __init__(self, value: str):
        super().__init__(
            value,
            "a name starting with a letter, followed by at least one of a-z, 0-9, -, _",
        )


class ConstraintFormatError(FormatError):
    """Raised when a dependency constraint token is invalid."""

    def __init__(self, value: str):
        super().__init__(value, "(=|!=|>|<|>=|<=|~)major.minor.patch[-release]")


class URLFormatError(FormatError):
    """Raised when a version control locator is invalid."""

    def __init__(self, value: str):
        super().__init__(value, "(git|hg|bzr)[:location]")


class IntegerOverflowError(PacksetError, ValueError):
    """Raised when a numeric version component exceeds the unsigned range."""

    code = "INTEGER_OVERFLOW"

    def __init__(self, value: str, component: str):
        self.value = value
        self.component = component
        super().__init__(f"packset: {component} version [{value}] is out of range")


class OperatorFormatError(PacksetError, ValueError):
    """Raised when a comparison operator token is not recognized."""

    code = "OPERATOR_FORMAT"

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"packset: [{value}] is not a valid operator, must be one of: "
            "=, !=, >, <, >=, <=, ~"
        )


# =============================================================================
# DOCUMENT, WORKSPACE AND REPOSITORY ERRORS
# =============================================================================


class ValidationError(PacksetError):
    """Raised when a pack file or path fails validation."""

    code = "VALIDATION_ERROR"


class WorkspaceError(PacksetError):
    """Raised when the workspace roots cannot be determined or used."""

    code = "WORKSPACE_ERROR"


class RepositoryError(PacksetError):
    """
    Raised when a version control command fails.

    Attributes:
        command: The command line that was run, if any
        stderr: Captured standard error, if any
    """

    code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str,
        command: Optional[list] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.command:
            data["command"] = " ".join(self.command)
        if self.stderr:
            data["stderr"] = self.stderr
        return data
