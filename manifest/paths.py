"""Path resolution for an extraction run.

Paths are computed from the extractor's own location, never from the
current working directory.
"""

from pathlib import Path

from utils import ARTIFACT_FILENAME, BUILD_DIR_NAME, MANIFEST_FILENAME

from .schemas import ExtractorPaths


def locate_tool_dir(entry_file: str | Path) -> Path:
    """Return the absolute directory containing the given source file.

    Args:
        entry_file: Path of the running tool (its __file__)

    Returns:
        Resolved parent directory
    """
    return Path(entry_file).resolve().parent


def resolve_paths(tool_dir: Path) -> ExtractorPaths:
    """Compute the artifact and manifest paths under <tool_dir>/build.

    Args:
        tool_dir: Absolute directory containing the tool

    Returns:
        ExtractorPaths for the run
    """
    build_dir = Path(tool_dir) / BUILD_DIR_NAME
    return ExtractorPaths(
        tool_dir=Path(tool_dir),
        artifact_path=build_dir / ARTIFACT_FILENAME,
        manifest_path=build_dir / MANIFEST_FILENAME,
    )
