"""Execution harness context.

The context owns all harness state for one extraction run. Callers reset it
to a clean baseline, bind exactly one build artifact, then read the live
contract mapping. Binding is refused until the context has been reset, and a
reset after a bind discards the bound artifact.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from utils import get_logger

from .errors import ArtifactLoadError, HarnessUnavailableError
from .loader import ArtifactLoader, LoadedArtifact
from .wasm import WasmExport

logger = get_logger(__name__)


class HarnessContext:
    """Process-local harness state with reset/bind lifecycle.

    This class:
    - Starts uninitialized; reset() establishes the baseline (no subject, empty contract)
    - Evaluates a loader exactly once per bind() and exposes its exports
    - Exposes `contract` as a live, read-only mapping of export name to descriptor
    - Refuses all operations once closed
    """

    def __init__(self):
        self._exports: dict[str, WasmExport] = {}
        self._contract = MappingProxyType(self._exports)
        self._subject: Optional[LoadedArtifact] = None
        self._initialized = False
        self._closed = False

    @property
    def contract(self) -> Mapping[str, WasmExport]:
        """Live view of the bound artifact's exports (empty at baseline)."""
        return self._contract

    @property
    def subject(self) -> Optional[LoadedArtifact]:
        """The currently bound artifact, if any."""
        return self._subject

    @property
    def closed(self) -> bool:
        return self._closed

    def reset(self) -> None:
        """Restore the harness to its baseline state.

        Raises:
            HarnessUnavailableError: If the context has been closed
        """
        if self._closed:
            raise HarnessUnavailableError("Cannot reset harness: context is closed")
        self._exports.clear()
        self._subject = None
        self._initialized = True
        logger.debug("Harness reset to baseline")

    def bind(self, loader: ArtifactLoader) -> None:
        """Evaluate a loader and make its artifact the active subject.

        A failed bind leaves the harness at baseline.

        Args:
            loader: Zero-argument callable returning a LoadedArtifact

        Raises:
            HarnessUnavailableError: If the context is closed or has not been reset
            ArtifactLoadError: If the loader fails
        """
        if self._closed:
            raise HarnessUnavailableError("Cannot bind artifact: context is closed")
        if not self._initialized:
            raise HarnessUnavailableError("Cannot bind artifact: harness has not been reset to baseline")

        self._exports.clear()
        self._subject = None

        try:
            artifact = loader()
        except ArtifactLoadError:
            raise
        except Exception as e:
            raise ArtifactLoadError(f"Build artifact failed to initialize: {e}") from e

        if not isinstance(artifact, LoadedArtifact):
            raise ArtifactLoadError(
                f"Artifact loader returned {type(artifact).__name__}, expected LoadedArtifact"
            )

        for export in artifact.exports:
            self._exports[export.name] = export
        self._subject = artifact
        logger.debug(f"Bound artifact {artifact.path} ({len(self._exports)} exports)")

    def close(self) -> None:
        """Discard all state. The context cannot be reused afterwards."""
        self._exports.clear()
        self._subject = None
        self._closed = True

    def __enter__(self) -> "HarnessContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
