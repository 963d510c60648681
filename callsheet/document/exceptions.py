class DocumentProcessingError(Exception):
    """Base exception for all document routing and adapter failures."""

    kind: str = "DocumentProcessingError"


class InvalidInputFormatError(DocumentProcessingError):
    """Raised when content does not match the encoding an adapter expects."""

    kind = "InvalidInputFormat"


class UnsupportedFormatError(DocumentProcessingError):
    """Raised for a recognized type with a disallowed subtype."""

    kind = "UnsupportedFormat"


class PayloadTooLargeError(UnsupportedFormatError):
    """Raised when an input exceeds the adapter's size limit."""

    kind = "PayloadTooLarge"


class InsufficientContentError(DocumentProcessingError):
    """Raised when decoded text is below the adapter's minimum length."""

    kind = "InsufficientContent"


class CorruptDocumentError(DocumentProcessingError):
    """Raised when an external tool produced no usable output."""

    kind = "CorruptDocument"


class ToolUnavailableError(DocumentProcessingError):
    """Raised when a required external binary is missing."""

    kind = "ToolUnavailable"


class NoProcessorFoundError(DocumentProcessingError):
    """Raised when no adapter claims the input."""

    kind = "NoProcessorFound"
