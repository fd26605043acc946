"""Manifest reader for downstream consumers.

Packaging and contract verification steps read the manifest back after a
build; this validates that it still has the shape the extractor writes.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from utils import ExtractionError, get_logger

from .schemas import ExportManifest

logger = get_logger(__name__)


class ManifestReadError(ExtractionError):
    """Raised when a manifest is missing or malformed."""

    pass


def read_manifest(manifest_path: str | Path) -> list[str]:
    """Read and validate a manifest file.

    Args:
        manifest_path: Path to exports.json

    Returns:
        Export names in file order

    Raises:
        ManifestReadError: If the file is missing, not JSON, or not an array of unique strings
    """
    path = Path(manifest_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestReadError(f"Manifest not found: {path}") from e
    except OSError as e:
        raise ManifestReadError(f"Failed to read manifest {path}: I/O error: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestReadError(f"Failed to parse manifest {path}: Invalid JSON syntax: {e}") from e
    except UnicodeDecodeError as e:
        raise ManifestReadError(f"Failed to read manifest {path}: Encoding error: {e}") from e

    if not isinstance(data, list):
        raise ManifestReadError(f"Manifest must be a JSON array, got {type(data).__name__}")

    try:
        manifest = ExportManifest.model_validate({"exports": data}, strict=True)
    except ValidationError as e:
        raise ManifestReadError(f"Invalid manifest {path}: {e}") from e

    logger.debug(f"Manifest read from: {path} ({len(manifest.exports)} exports)")
    return list(manifest.exports)
