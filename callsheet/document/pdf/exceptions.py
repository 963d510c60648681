class PdfTextExtractionError(Exception):
    """Raised when the PDF text layer cannot be read."""
