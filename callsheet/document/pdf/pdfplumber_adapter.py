import io

import pdfplumber

from callsheet.document.pdf.base import BasePdfTextExtractor, PdfTextLayer
from callsheet.document.pdf.exceptions import PdfTextExtractionError


class PdfPlumberAdapter(BasePdfTextExtractor):
    """Extracts the PDF text layer using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> PdfTextLayer:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return PdfTextLayer(text="\n".join(pages).strip(), page_count=len(pages))
        except PdfTextExtractionError:
            raise
        except Exception as exc:
            raise PdfTextExtractionError(f"pdfplumber extraction failed: {exc}") from exc
