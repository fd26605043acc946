"""File helper utilities for the export manifest extractor.

This module provides path validation and atomic writes used by the
artifact loader and the manifest writer.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when path validation fails."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        OSError: If directory creation fails
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to resolve or create directory {path}: {e}")
        raise


def validate_path_safe(
    file_path: str | Path,
    must_exist: bool = False,
    must_be_file: bool = False,
) -> Path:
    """Validate a path and resolve it.

    This function:
    - Rejects directory traversal components (..)
    - Resolves symlinks
    - Validates file existence and type

    Args:
        file_path: Path to validate
        must_exist: If True, path must exist
        must_be_file: If True, path must be a file

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If must_exist=True and path doesn't exist
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(f"Path contains directory traversal sequence: {file_path}")

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        else:
            raise FileNotFoundError(f"File does not exist: {file_path}")

    return resolved


def _target_mode(path: Path) -> int:
    """Permission bits the written file should carry.

    An existing file keeps its mode; a new one gets the umask default.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str) -> int:
    """Write text to a file so readers never observe a partial write.

    The content goes to a temporary file in the target directory, which
    then replaces the target in one rename. The target keeps its existing
    permissions, or gets the umask default when it is new.

    Args:
        path: Destination file
        text: Content to write (UTF-8)

    Returns:
        Size of the written file in bytes

    Raises:
        OSError: If the directory cannot be created or the write fails
    """
    directory = ensure_directory(path.parent)
    with tempfile.NamedTemporaryFile(
        "w", dir=str(directory), prefix=f".{path.name}.", suffix=".tmp", delete=False, encoding="utf-8"
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(text)
        except BaseException:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise
    try:
        os.chmod(tmp_path, _target_mode(path))
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Text written atomically to: {path}")
    return path.stat().st_size
