"""Execution harness for compiled build artifacts.

This package loads a compiled WebAssembly module and exposes its public
surface as a contract mapping. It does not execute any exported symbol.
"""

from .context import HarnessContext
from .errors import ArtifactLoadError, HarnessError, HarnessUnavailableError
from .loader import ArtifactLoader, LoadedArtifact, load_wasm_artifact, wasm_artifact
from .wasm import ExportKind, WasmExport, WasmFormatError, read_exports

__all__ = [
    "HarnessContext",
    "ArtifactLoadError",
    "HarnessError",
    "HarnessUnavailableError",
    "ArtifactLoader",
    "LoadedArtifact",
    "load_wasm_artifact",
    "wasm_artifact",
    "ExportKind",
    "WasmExport",
    "WasmFormatError",
    "read_exports",
]
