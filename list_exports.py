"""Command-line entry point for the export manifest extractor.

Reads build/debug.wasm next to this file and writes build/exports.json
beside it. The tool takes no arguments; all paths derive from its own
location so it behaves the same from any working directory.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from harness import ArtifactLoadError, HarnessContext, HarnessUnavailableError
from manifest import ExportManifestExtractor, ManifestWriteError, locate_tool_dir, resolve_paths
from utils import (
    APP_NAME,
    EXIT_ARTIFACT_LOAD_FAILED,
    EXIT_HARNESS_UNAVAILABLE,
    EXIT_MANIFEST_WRITE_FAILED,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_logger,
    setup_logging,
)

TOOL_DIR = locate_tool_dir(__file__)

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    The parser defines no options; it only provides --help and rejects
    anything else.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Write the export names of build/debug.wasm to build/exports.json",
    )
    return parser.parse_args(argv)


def run_extraction(tool_dir: Path) -> int:
    """Run one extraction for the build directory under tool_dir.

    Args:
        tool_dir: Directory containing the tool

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    paths = resolve_paths(tool_dir)

    try:
        with HarnessContext() as harness:
            export_names = ExportManifestExtractor(harness, paths).extract()
    except HarnessUnavailableError as e:
        print(f"✗ Harness unavailable: {e}", file=sys.stderr)
        return EXIT_HARNESS_UNAVAILABLE
    except ArtifactLoadError as e:
        print(f"✗ Failed to load build artifact: {e}", file=sys.stderr)
        return EXIT_ARTIFACT_LOAD_FAILED
    except ManifestWriteError as e:
        print(f"✗ Failed to write manifest: {e}", file=sys.stderr)
        return EXIT_MANIFEST_WRITE_FAILED
    except KeyboardInterrupt:
        print("\n✗ Extraction interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {e}", file=sys.stderr)
        logger.exception("Unexpected error during export extraction")
        return EXIT_RUNTIME_ERROR

    logger.info(f"Extraction complete: {len(export_names)} exports -> {paths.manifest_path}")
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parse_args(argv)
    setup_logging()
    return run_extraction(TOOL_DIR)


if __name__ == "__main__":
    sys.exit(main())
