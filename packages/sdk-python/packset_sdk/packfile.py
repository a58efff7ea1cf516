"""
Pack File I/O
=============

Reads and writes pack files (``pack.yaml``). Validation lives in
packset_schema; this module only deals with files and streams.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from packset_common.constants import SUPPORTED_PACKFILE_NAMES
from packset_common.errors import ValidationError
from packset_common.logger import get_logger
from packset_schema import PackSpec, from_yaml_string, to_yaml_string

logger = get_logger(__name__)

PathLike = Union[str, Path]


def parse_pack(stream: TextIO) -> PackSpec:
    """
    Parse a pack document from an open text stream.

    Raises:
        ValidationError: If the YAML or the document is invalid
        OSError: If the stream cannot be read
    """
    return from_yaml_string(stream.read())


def load_pack(path: PathLike) -> PackSpec:
    """
    Load and validate a pack file.

    Args:
        path: Path to the pack file (typically "pack.yaml")

    Returns:
        Validated PackSpec

    Raises:
        ValidationError: If the file is missing, is not valid YAML, or fails validation

    Example:
        >>> spec = load_pack("pack.yaml")
        >>> print(spec.version)
        1.0.0
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ValidationError(
            f"Pack file not found: {path}\n"
            f"Make sure the file exists and the path is correct."
        )

    with open(file_path, "r", encoding="utf-8") as f:
        spec = parse_pack(f)
    logger.debug("Loaded pack file", path=str(file_path), name=spec.name)
    return spec


def write_pack_to(spec: PackSpec, stream: TextIO) -> None:
    """Write a pack document to an open text stream."""
    stream.write(to_yaml_string(spec))


def write_pack(spec: PackSpec, path: PathLike) -> None:
    """Write a pack document to ``path``, replacing any existing file."""
    file_path = Path(path)
    with open(file_path, "w", encoding="utf-8") as f:
        write_pack_to(spec, f)
    logger.debug("Wrote pack file", path=str(file_path), name=spec.name)


def find_pack_file(start_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the nearest pack file.

    Walks up the directory tree from start_path looking for one of the
    supported pack file names.

    Args:
        start_path: Starting directory (defaults to current working directory)

    Returns:
        Path to the pack file, or None if not found
    """
    current = (start_path or Path.cwd()).resolve()
    for parent in [current] + list(current.parents):
        for name in SUPPORTED_PACKFILE_NAMES:
            candidate = parent / name
            if candidate.is_file():
                return candidate
    return None


__all__ = [
    "parse_pack",
    "load_pack",
    "write_pack",
    "write_pack_to",
    "find_pack_file",
]
