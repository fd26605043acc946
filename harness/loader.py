"""Build artifact loaders.

A loader is a zero-argument callable that reads a compiled artifact and
returns its exports. Loaders are handed to HarnessContext.bind() unevaluated
so that a missing or malformed artifact fails at exactly one point.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from utils import PathValidationError, get_logger, validate_path_safe

from .errors import ArtifactLoadError
from .wasm import WasmExport, WasmFormatError, read_exports

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadedArtifact:
    """A build artifact after it has been read and decoded."""

    path: Path
    exports: tuple[WasmExport, ...]


ArtifactLoader = Callable[[], LoadedArtifact]


def load_wasm_artifact(file_path: str | Path) -> LoadedArtifact:
    """Read a compiled WebAssembly module from disk.

    Args:
        file_path: Path to the .wasm file

    Returns:
        LoadedArtifact with the module's exports in declaration order

    Raises:
        ArtifactLoadError: If the file is missing, unreadable or not a valid module
    """
    try:
        path = validate_path_safe(file_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise ArtifactLoadError(f"Invalid artifact path: {e}") from e
    except FileNotFoundError as e:
        raise ArtifactLoadError(f"Build artifact not found: {file_path}") from e

    logger.info(f"Loading build artifact from: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ArtifactLoadError(f"Failed to read build artifact {path}: I/O error: {e}") from e

    try:
        exports = read_exports(data)
    except WasmFormatError as e:
        raise ArtifactLoadError(f"Malformed build artifact {path}: {e}") from e

    logger.debug(f"Artifact decoded: {len(data)} bytes, {len(exports)} exports")
    return LoadedArtifact(path=path, exports=tuple(exports))


def wasm_artifact(file_path: str | Path) -> ArtifactLoader:
    """Create a deferred loader for a WebAssembly build artifact.

    Nothing is read until the returned callable is invoked.

    Args:
        file_path: Path to the .wasm file

    Returns:
        Zero-argument loader
    """

    def _load() -> LoadedArtifact:
        return load_wasm_artifact(file_path)

    return _load
