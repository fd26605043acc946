"""Export manifest extractor.

Resets the harness, binds the build artifact, reads the harness's contract
keys and writes them to the manifest. The reset must precede the bind: a
reset afterwards would discard the binding and leave an empty export set.
"""

from pathlib import Path
from typing import Callable

from harness import ArtifactLoader, HarnessContext, wasm_artifact
from utils import get_logger

from .logging import log_exports_enumerated
from .schemas import ExtractorPaths
from .writer import write_manifest

logger = get_logger(__name__)


class ExportManifestExtractor:
    """Produces a file-based record of a build artifact's public interface.

    This class:
    - Drives the harness through reset, then bind
    - Reads the export set from the live contract mapping
    - Writes the manifest as the final step, so failures leave it untouched
    """

    def __init__(
        self,
        harness: HarnessContext,
        paths: ExtractorPaths,
        loader_factory: Callable[[Path], ArtifactLoader] = wasm_artifact,
    ):
        """Initialize extractor.

        Args:
            harness: Harness context owned by this run
            paths: Artifact and manifest locations
            loader_factory: Builds the deferred artifact loader for a path
        """
        self.harness = harness
        self.paths = paths
        self.loader_factory = loader_factory

    def extract(self) -> list[str]:
        """Run the extraction and write the manifest.

        Returns:
            Export names written to the manifest

        Raises:
            HarnessUnavailableError: If the harness reset fails
            ArtifactLoadError: If the build artifact cannot be loaded
            ManifestWriteError: If the manifest cannot be written
        """
        logger.info(f"Extracting exports of {self.paths.artifact_path}")

        self.harness.reset()
        self.harness.bind(self.loader_factory(self.paths.artifact_path))

        export_names = list(self.harness.contract.keys())
        log_exports_enumerated(str(self.paths.artifact_path), export_names)

        write_manifest(export_names, self.paths.manifest_path)
        return export_names
