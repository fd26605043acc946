"""Exceptions raised by the execution harness."""

from utils.errors import ExtractionError


class HarnessError(ExtractionError):
    """Base class for harness failures."""

    pass


class HarnessUnavailableError(HarnessError):
    """Raised when the harness cannot be restored to its baseline state."""

    pass


class ArtifactLoadError(HarnessError):
    """Raised when a build artifact cannot be located, read or parsed."""

    pass
