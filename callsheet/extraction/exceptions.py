class ExtractionError(Exception):
    """Raised when AI contact extraction fails."""


class ExtractionValidationError(ExtractionError):
    """Raised when the AI response does not have the expected structure."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
