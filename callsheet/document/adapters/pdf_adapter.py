"""PDF adapter: text-layer extraction with a vision fallback for scans."""

import tempfile
import uuid
from pathlib import Path
from typing import ClassVar

from callsheet.document.adapters.base import BaseDocumentAdapter
from callsheet.document.data_url import parse_data_url
from callsheet.document.exceptions import CorruptDocumentError, InvalidInputFormatError
from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
)
from callsheet.document.pdf.base import BasePdfTextExtractor, PdfTextLayer
from callsheet.document.pdf.exceptions import PdfTextExtractionError
from callsheet.document.pdf.pdfplumber_adapter import PdfPlumberAdapter
from callsheet.document.pdf.rasterizer import PopplerRasterizer
from callsheet.logging.logger import Log

PDF_MIME_TYPE = "application/pdf"


class PdfAdapter(BaseDocumentAdapter):
    """Routes text-based PDFs to text extraction and scanned PDFs to vision.

    Every job works in its own temporary directory, which is removed before
    ``process`` returns, whatever the outcome.
    """

    label: ClassVar[str] = "PDF"

    MIN_TEXT_LENGTH: ClassVar[int] = 100
    MAX_PAGES_FOR_VISION: ClassVar[int] = 5
    IMAGE_DPI: ClassVar[int] = 150

    def __init__(
        self,
        text_extractor: BasePdfTextExtractor | None = None,
        rasterizer: PopplerRasterizer | None = None,
    ) -> None:
        self._text_extractor = text_extractor or PdfPlumberAdapter()
        self._rasterizer = rasterizer or PopplerRasterizer(dpi=self.IMAGE_DPI)

    def can_process(self, content: str, mime_hint: str | None = None) -> bool:
        return content.startswith(f"data:{PDF_MIME_TYPE}") or mime_hint == PDF_MIME_TYPE

    def _process(self, content: str, filename: str) -> ProcessedDocument:
        data_url = parse_data_url(content)
        if data_url is None or data_url.mime_type != PDF_MIME_TYPE or not data_url.is_base64:
            raise InvalidInputFormatError("Invalid PDF data URL format")
        pdf_bytes = data_url.decode()

        job_id = uuid.uuid4().hex
        with tempfile.TemporaryDirectory(prefix=f"callsheet-pdf-{job_id}-") as temp_dir:
            work_dir = Path(temp_dir)
            pdf_path = work_dir / "input.pdf"
            pdf_path.write_bytes(pdf_bytes)

            text_layer = self._read_text_layer(pdf_bytes)
            Log.info(f"PDF loaded: {filename} ({text_layer.page_count} pages, job {job_id})")

            metadata = DocumentMetadata(
                original_filename=filename,
                mime_type=PDF_MIME_TYPE,
                size=len(pdf_bytes),
                page_count=text_layer.page_count or None,
            )

            if len(text_layer.text.strip()) >= self.MIN_TEXT_LENGTH:
                Log.info(f"PDF has extractable text: {len(text_layer.text)} chars")
                return ProcessedDocument(
                    type=DocumentType.PDF,
                    text_content=text_layer.text,
                    metadata=metadata,
                    strategy=ProcessingStrategy.TEXT_EXTRACTION,
                )

            Log.info(
                f"PDF appears to be scanned ({len(text_layer.text)} chars of text), "
                "converting to images"
            )
            pages = min(text_layer.page_count or self.MAX_PAGES_FOR_VISION, self.MAX_PAGES_FOR_VISION)
            images = self._rasterizer.rasterize(pdf_path, work_dir, pages)

        if not images:
            raise CorruptDocumentError("Failed to convert PDF to images. The file may be corrupted.")

        return ProcessedDocument(
            type=DocumentType.PDF,
            images=images[: self.MAX_PAGES_FOR_VISION],
            metadata=metadata,
            strategy=ProcessingStrategy.VISION,
        )

    def _read_text_layer(self, pdf_bytes: bytes) -> PdfTextLayer:
        try:
            return self._text_extractor.extract(pdf_bytes)
        except PdfTextExtractionError as exc:
            Log.warning(f"Text extraction failed, PDF may be image-based: {exc}")
            return PdfTextLayer(text="", page_count=0)
