"""
packset Shared Constants

This module defines constants used across the packset packages.
It is the single source of truth for grammar patterns, folder names,
environment variable names and defaults.

Usage:
    from packset_common.constants import VERSION_PATTERN, VCS_SCHEMES

    if scheme not in VCS_SCHEMES:
        raise URLFormatError(locator)
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

PACKSET_VERSION = "0.1.0"
"""Current packset tool version"""

SUPPORTED_PACKFILE_NAMES = ["pack.yaml", "pack.yml"]
"""File names recognized as pack files, in lookup order"""


# =============================================================================
# GRAMMAR PATTERNS
# =============================================================================
# All patterns are compiled with re.IGNORECASE by their consumers.

NUMBER_PATTERN = r"0|[1-9][0-9]*"
"""A version component: literal 0 or a number without leading zeros"""

IDENTIFIER_PATTERN = r"[1-9][0-9]*|[a-z][a-z0-9]*"
"""A release identifier: leading-zero-free integer or alphanumeric starting with a letter"""

RELEASE_PATTERN = rf"(?:{IDENTIFIER_PATTERN})(?:\.(?:{IDENTIFIER_PATTERN}))*"
"""Dot separated release identifiers"""

VERSION_PATTERN = (
    rf"({NUMBER_PATTERN})\.({NUMBER_PATTERN})\.({NUMBER_PATTERN})"
    rf"(?:-({RELEASE_PATTERN}))?"
)
"""major.minor.patch[-release] with capture groups for each part"""

OPERATOR_PATTERN = r"!=|>=|<=|=|>|<|~"
"""Comparison operators, longest first"""

CONSTRAINT_PATTERN = rf"^({OPERATOR_PATTERN})?{VERSION_PATTERN}$"
"""[operator]version"""

DEPENDENCY_NAME_PATTERN = r"^[a-z][a-z0-9_\-]+$"
"""Dependency name: a letter followed by at least one of a-z, 0-9, -, _"""

VCS_SCHEMES = ["git", "hg", "bzr"]
"""Version control systems a dependency may point at"""

VCS_LOCATOR_PATTERN = r"^(git|hg|bzr)(?::([a-z0-9?\-_@.:/=%&~+]+))?$"
"""(git|hg|bzr)[:location]"""

VERSION_EXPECTED_FORM = "major.minor.patch[-release]"
"""Human readable version form used in error messages"""


# =============================================================================
# NUMERIC LIMITS
# =============================================================================

MAX_VERSION_COMPONENT = 2**32 - 1
"""Largest accepted major, minor or patch number (unsigned 32 bit)"""


# =============================================================================
# WORKSPACE LAYOUT
# =============================================================================

PACKSET_HOME_FOLDER = "packset"
"""Folder under the first root that holds packsets and the config file"""

SRC_FOLDER = "src"
"""Folder holding package sources inside a root or packset"""

CONFIG_FILE = "config.yaml"
"""Name of the packset configuration file"""

DEFAULT_PACKSET = "default"
"""Packset used when none is given"""


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================

ENV_PREFIX = "PACKSET_"
"""Prefix for all packset settings read from the environment"""

ENV_PATH = "PACKSET_PATH"
"""Environment variable listing workspace roots (os.pathsep separated)"""


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_LOG_LEVEL = "info"
"""Default logging level"""

LOG_LEVELS = ["debug", "info", "warn", "error"]
"""Valid log levels"""

DEFAULT_VCS_TIMEOUT = 300
"""Default timeout in seconds for a single version control command"""
