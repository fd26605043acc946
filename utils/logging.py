"""Logging utilities for the export manifest extractor.

This module provides shared logging configuration and utilities
used across the harness and manifest packages.
"""

import logging
import sys
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL


def setup_logging(level: Optional[int | str] = None) -> None:
    """Configure logging for a single extraction run.

    This function sets up the root logger with a consistent format.
    It can be called multiple times safely.

    Args:
        level: Optional explicit log level, numeric or name (defaults to DEFAULT_LOG_LEVEL)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    log_level = level if level is not None else DEFAULT_LOG_LEVEL

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
