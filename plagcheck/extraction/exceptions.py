class ExtractionError(Exception):
    """Base exception for per-file text extraction failures."""


class FileReadError(ExtractionError):
    """Raised when a submitted file cannot be read from disk."""


class MalformedJsonError(ExtractionError):
    """Raised when a .json submission is not valid UTF-8 JSON."""


class MissingExtractorError(ExtractionError):
    """Raised when no extraction capability is configured for a file type."""
