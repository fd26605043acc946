"""Export manifest extraction.

This package records the public interface of a compiled build artifact as a
JSON manifest at <tool dir>/build/exports.json. It does not validate the
artifact's semantics and never executes exported symbols.
"""

from .extractor import ExportManifestExtractor
from .paths import locate_tool_dir, resolve_paths
from .reader import ManifestReadError, read_manifest
from .schemas import ExportManifest, ExtractorPaths
from .writer import ManifestWriteError, write_manifest

__all__ = [
    "ExportManifestExtractor",
    "locate_tool_dir",
    "resolve_paths",
    "ManifestReadError",
    "read_manifest",
    "ExportManifest",
    "ExtractorPaths",
    "ManifestWriteError",
    "write_manifest",
]
