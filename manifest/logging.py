"""Logging helpers for manifest operations."""

from utils import get_logger

logger = get_logger(__name__)


def log_exports_enumerated(artifact_path: str, export_names: list[str]) -> None:
    """Log the export set read from the harness.

    Args:
        artifact_path: Path of the bound artifact
        export_names: Names in enumeration order
    """
    logger.info(f"Enumerated {len(export_names)} exports from {artifact_path}")
    logger.debug(f"Exports: {export_names}")


def log_manifest_written(manifest_path: str, size: int) -> None:
    """Log a completed manifest write.

    Args:
        manifest_path: Path of the written manifest
        size: Size of the manifest in bytes
    """
    logger.info(f"Manifest written: {manifest_path} ({size} bytes)")
