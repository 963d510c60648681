class PipelineError(Exception):
    """Base exception for extraction pipeline errors."""


class ExtractionFailedError(PipelineError):
    """Raised when a document cannot be turned into an extraction."""
