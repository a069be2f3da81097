"""
Input validation utilities for export and CLI inputs.

Guards file names and paths that come from the command line or the UI
before anything touches the filesystem.
"""

import re
from pathlib import Path


class ArtifactNameError(ValueError):
    """Raised when an export file name or path is rejected."""
    pass


# Characters no export file name may contain
_FORBIDDEN_NAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def validate_artifact_name(filename: str, field_name: str = "filename") -> str:
    """
    Validate the name of an export artifact.

    Names are plain file names: no directories, no traversal, no control
    characters. Non-ASCII names (e.g. "収益性レポート_2026-01-10.csv") are fine.

    Args:
        filename: The file name to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated file name (stripped of whitespace)

    Raises:
        ArtifactNameError: If validation fails

    Examples:
        >>> validate_artifact_name("report.csv")
        'report.csv'
        >>> validate_artifact_name("../etc/passwd")  # doctest: +SKIP
        ArtifactNameError: filename contains path traversal characters (..)
    """
    if not filename or not isinstance(filename, str):
        raise ArtifactNameError(f"{field_name} must be a non-empty string")

    filename = filename.strip()

    if not filename:
        raise ArtifactNameError(f"{field_name} cannot be empty or whitespace-only")

    if ".." in filename:
        raise ArtifactNameError(f"{field_name} contains path traversal characters (..)")

    if _FORBIDDEN_NAME_CHARS.search(filename):
        raise ArtifactNameError(
            f"{field_name} contains invalid characters. "
            "Path separators, wildcards and control characters are not allowed."
        )

    # Most filesystems cap a single name at 255 bytes
    if len(filename.encode("utf-8")) > 255:
        raise ArtifactNameError(f"{field_name} exceeds maximum length of 255 bytes")

    return filename


def validate_file_path(file_path: str | Path, field_name: str = "file_path") -> Path:
    """
    Validate an input file path.

    Args:
        file_path: The file path to validate
        field_name: Name of the field (for error messages)

    Returns:
        The path as a Path object

    Raises:
        ArtifactNameError: If the path is empty, contains null bytes, or
            does not point to an existing file
    """
    text = str(file_path).strip() if file_path is not None else ""
    if not text:
        raise ArtifactNameError(f"{field_name} must be a non-empty path")

    if "\x00" in text:
        raise ArtifactNameError(f"{field_name} contains null bytes")

    path = Path(text)
    if not path.is_file():
        raise ArtifactNameError(f"{field_name} does not exist or is not a file: {text}")

    return path
