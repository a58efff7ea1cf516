"""
packset Common Package

Shared utilities and primitives used across all packset packages.

This package provides:
- Exception classes for consistent error handling
- Constants for grammar patterns, folder names and defaults
- A structured logger
- Settings read from the environment

Usage:
    from packset_common import FormatError, get_logger, get_settings

    logger = get_logger(__name__)
    settings = get_settings()
"""

# Error classes
from .errors import (
    PacksetError,
    EmptyInputError,
    FormatError,
    NameFormatError,
    ConstraintFormatError,
    URLFormatError,
    IntegerOverflowError,
    OperatorFormatError,
    ValidationError,
    WorkspaceError,
    RepositoryError,
)

# Constants
from .constants import (
    PACKSET_VERSION,
    SUPPORTED_PACKFILE_NAMES,
    VCS_SCHEMES,
    LOG_LEVELS,
    MAX_VERSION_COMPONENT,
)

# Logger
from .logger import (
    PacksetLogger,
    get_logger,
    configure_logging,
)

# Settings
from .config import Settings, get_settings

__version__ = PACKSET_VERSION

__all__ = [
    # Errors
    "PacksetError",
    "EmptyInputError",
    "FormatError",
    "NameFormatError",
    "ConstraintFormatError",
    "URLFormatError",
    "IntegerOverflowError",
    "OperatorFormatError",
    "ValidationError",
    "WorkspaceError",
    "RepositoryError",
    # Constants
    "PACKSET_VERSION",
    "SUPPORTED_PACKFILE_NAMES",
    "VCS_SCHEMES",
    "LOG_LEVELS",
    "MAX_VERSION_COMPONENT",
    # Logger
    "PacksetLogger",
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
