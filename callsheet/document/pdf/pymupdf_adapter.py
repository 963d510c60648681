import pymupdf

from callsheet.document.pdf.base import BasePdfTextExtractor, PdfTextLayer
from callsheet.document.pdf.exceptions import PdfTextExtractionError


class PyMuPdfAdapter(BasePdfTextExtractor):
    """Extracts the PDF text layer using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> PdfTextLayer:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return PdfTextLayer(text="\n".join(pages).strip(), page_count=len(pages))
        except PdfTextExtractionError:
            raise
        except Exception as exc:
            raise PdfTextExtractionError(f"pymupdf extraction failed: {exc}") from exc
