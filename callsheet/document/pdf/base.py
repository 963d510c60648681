from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PdfTextLayer:
    """Embedded text of a PDF together with its page count."""

    text: str
    page_count: int


class BasePdfTextExtractor(ABC):
    """Contract for all PDF text-layer extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfTextLayer:
        """Extract embedded text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfTextLayer with the page texts joined by newlines.

        Raises:
            PdfTextExtractionError: if extraction fails for any reason.
        """
