"""Manifest writer.

Writes the export set as a JSON array, replacing any previous manifest in a
single rename so the file is never observed half-written.
"""

from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from utils import ExtractionError, atomic_write_text, get_logger

from .logging import log_manifest_written
from .schemas import ExportManifest

logger = get_logger(__name__)


class ManifestWriteError(ExtractionError):
    """Raised when the manifest cannot be written."""

    pass


def write_manifest(export_names: Sequence[str], manifest_path: Path) -> Path:
    """Write export names to the manifest file, overwriting it.

    Args:
        export_names: Export names in enumeration order
        manifest_path: Destination file

    Returns:
        Path to the written manifest

    Raises:
        ManifestWriteError: If the names are not a valid manifest or the write fails
    """
    try:
        manifest = ExportManifest(exports=list(export_names))
    except ValidationError as e:
        raise ManifestWriteError(f"Refusing to write invalid manifest: {e}") from e

    manifest_path = Path(manifest_path)
    try:
        size = atomic_write_text(manifest_path, manifest.to_json())
    except OSError as e:
        raise ManifestWriteError(f"Failed to write manifest {manifest_path}: I/O error: {e}") from e

    log_manifest_written(str(manifest_path), size)
    return manifest_path
