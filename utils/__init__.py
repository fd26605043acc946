"""Shared utilities for the export manifest extractor.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    ARTIFACT_FILENAME,
    BUILD_DIR_NAME,
    DEFAULT_LOG_LEVEL,
    EXIT_ARTIFACT_LOAD_FAILED,
    EXIT_HARNESS_UNAVAILABLE,
    EXIT_MANIFEST_WRITE_FAILED,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    MANIFEST_FILENAME,
)
from .errors import ExtractionError
from .file_helpers import (
    atomic_write_text,
    ensure_directory,
    PathValidationError,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "ARTIFACT_FILENAME",
    "BUILD_DIR_NAME",
    "DEFAULT_LOG_LEVEL",
    "EXIT_ARTIFACT_LOAD_FAILED",
    "EXIT_HARNESS_UNAVAILABLE",
    "EXIT_MANIFEST_WRITE_FAILED",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "MANIFEST_FILENAME",
    "ExtractionError",
    "atomic_write_text",
    "ensure_directory",
    "PathValidationError",
    "validate_path_safe",
    "get_logger",
    "setup_logging",
]
