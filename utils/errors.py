"""Base exception shared by every failure domain of an extraction run."""


class ExtractionError(Exception):
    """Raised when an extraction run cannot complete."""

    pass
