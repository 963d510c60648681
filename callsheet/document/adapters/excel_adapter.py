import io
from collections.abc import Iterable
from typing import ClassVar

import openpyxl

from callsheet.document.adapters.base import BaseDocumentAdapter, require_min_length, truncate
from callsheet.document.data_url import parse_data_url
from callsheet.document.exceptions import InsufficientContentError, InvalidInputFormatError
from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
)
from callsheet.logging.logger import Log

XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLS_MIME_TYPE = "application/vnd.ms-excel"


class ExcelAdapter(BaseDocumentAdapter):
    """Renders every sheet of a workbook as pipe-delimited text."""

    label: ClassVar[str] = "Excel"

    MIN_TEXT_LENGTH: ClassVar[int] = 50
    MAX_TEXT_LENGTH: ClassVar[int] = 50_000
    SHEET_SEPARATOR: ClassVar[str] = "\n\n---\n\n"
    TRUNCATION_MARKER: ClassVar[str] = "\n\n[Document truncated - showing first 50,000 characters]"

    def can_process(self, content: str, mime_hint: str | None = None) -> bool:
        return (
            content.startswith("data:application/vnd.openxmlformats-officedocument.spreadsheetml")
            or content.startswith(f"data:{XLS_MIME_TYPE}")
            or mime_hint in (XLSX_MIME_TYPE, XLS_MIME_TYPE)
        )

    def _process(self, content: str, filename: str) -> ProcessedDocument:
        data_url = parse_data_url(content)
        if data_url is None or not data_url.is_base64:
            raise InvalidInputFormatError("Invalid Excel document data URL format")
        workbook_bytes = data_url.decode()

        workbook = openpyxl.load_workbook(io.BytesIO(workbook_bytes), read_only=True, data_only=True)
        try:
            if not workbook.sheetnames:
                raise InsufficientContentError("Excel file contains no sheets")
            sheet_count = len(workbook.sheetnames)
            parts = []
            for sheet in workbook.worksheets:
                sheet_text = format_sheet(sheet.title, sheet.iter_rows(values_only=True))
                if sheet_text:
                    parts.append(sheet_text)
        finally:
            workbook.close()

        text = self.SHEET_SEPARATOR.join(parts)
        require_min_length(
            text,
            self.MIN_TEXT_LENGTH,
            "Excel file has insufficient data ({length} characters). "
            "The file may be empty or contain only formatting.",
        )
        text = truncate(text, self.MAX_TEXT_LENGTH, self.TRUNCATION_MARKER)

        Log.info(f"Excel document processed: {filename} ({sheet_count} sheets, {len(text)} chars)")
        return ProcessedDocument(
            type=DocumentType.TEXT,
            text_content=text,
            metadata=DocumentMetadata(
                original_filename=filename,
                mime_type=XLSX_MIME_TYPE,
                size=len(workbook_bytes),
            ),
            strategy=ProcessingStrategy.TEXT_EXTRACTION,
        )


def format_sheet(sheet_name: str, rows: Iterable[tuple[object, ...]]) -> str:
    """Render one sheet; returns "" when the sheet has no non-empty rows."""
    lines = []
    for row in rows:
        cells = ["" if cell is None else str(cell).strip() for cell in row]
        if not any(cells):
            continue
        lines.append(" | ".join(cells))
    if not lines:
        return ""
    return "\n".join([f"=== Sheet: {sheet_name} ===", "", *lines])
