import io
from typing import ClassVar

import docx

from callsheet.document.adapters.base import BaseDocumentAdapter, require_min_length, truncate
from callsheet.document.data_url import parse_data_url
from callsheet.document.exceptions import InvalidInputFormatError
from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
)
from callsheet.logging.logger import Log

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class WordAdapter(BaseDocumentAdapter):
    """Extracts raw text from .docx documents with python-docx."""

    label: ClassVar[str] = "Word"

    MIN_TEXT_LENGTH: ClassVar[int] = 50
    MAX_TEXT_LENGTH: ClassVar[int] = 50_000
    TRUNCATION_MARKER: ClassVar[str] = "\n\n[Document truncated - showing first 50,000 characters]"

    def can_process(self, content: str, mime_hint: str | None = None) -> bool:
        return (
            content.startswith("data:application/vnd.openxmlformats-officedocument.wordprocessingml")
            or mime_hint == DOCX_MIME_TYPE
            or mime_hint == "application/msword"
        )

    def _process(self, content: str, filename: str) -> ProcessedDocument:
        data_url = parse_data_url(content)
        if data_url is None or not data_url.is_base64:
            raise InvalidInputFormatError("Invalid Word document data URL format")
        doc_bytes = data_url.decode()

        text = self._extract_text(doc_bytes)
        require_min_length(
            text,
            self.MIN_TEXT_LENGTH,
            "Word document has insufficient text content ({length} characters).",
        )
        text = truncate(text, self.MAX_TEXT_LENGTH, self.TRUNCATION_MARKER)

        Log.info(f"Word document processed: {filename} ({len(text)} chars)")
        return ProcessedDocument(
            type=DocumentType.TEXT,
            text_content=text,
            metadata=DocumentMetadata(
                original_filename=filename,
                mime_type=DOCX_MIME_TYPE,
                size=len(doc_bytes),
            ),
            strategy=ProcessingStrategy.TEXT_EXTRACTION,
        )

    @staticmethod
    def _extract_text(doc_bytes: bytes) -> str:
        document = docx.Document(io.BytesIO(doc_bytes))
        blocks = [p.text for p in document.paragraphs]
        # Call sheets keep most contacts in tables.
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    blocks.append(" | ".join(cells))
        return "\n".join(blocks)
