"""Constants for the export manifest extractor.

This module defines exit codes and the fixed build layout names.
There is no runtime configuration: every path is derived from these.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_HARNESS_UNAVAILABLE = 1
EXIT_ARTIFACT_LOAD_FAILED = 2
EXIT_MANIFEST_WRITE_FAILED = 3
EXIT_RUNTIME_ERROR = 4

# Application metadata
APP_NAME = "list-exports"

# Build layout, relative to the tool directory
BUILD_DIR_NAME = "build"
ARTIFACT_FILENAME = "debug.wasm"
MANIFEST_FILENAME = "exports.json"

# Default values
DEFAULT_LOG_LEVEL = "INFO"
