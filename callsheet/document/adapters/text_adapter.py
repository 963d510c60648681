from typing import ClassVar

from callsheet.document.adapters.base import BaseDocumentAdapter, require_min_length
from callsheet.document.data_url import parse_data_url
from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
)
from callsheet.logging.logger import Log


class TextAdapter(BaseDocumentAdapter):
    """Catch-all adapter for pasted text and ``data:text/*`` URLs."""

    label: ClassVar[str] = "Text"

    MIN_TEXT_LENGTH: ClassVar[int] = 10
    MAX_TEXT_LENGTH: ClassVar[int] = 50_000
    TRUNCATION_NOTICE: ClassVar[str] = (
        "\n\n[Document truncated - showing first ~50,000 characters. "
        "Contact information is typically in the first section.]"
    )

    def can_process(self, content: str, mime_hint: str | None = None) -> bool:
        if not content.startswith("data:"):
            return True
        if content.startswith("data:text/"):
            return True
        return mime_hint is not None and mime_hint.startswith("text/")

    def _process(self, content: str, filename: str) -> ProcessedDocument:
        text = self._decode(content)
        require_min_length(
            text,
            self.MIN_TEXT_LENGTH,
            "Text content too short. Please provide at least {min_length} characters.",
        )
        if len(text) > self.MAX_TEXT_LENGTH:
            Log.info(f"Truncating large text content: {filename} ({len(text)} chars)")
            text = smart_truncate(text, self.MAX_TEXT_LENGTH, self.TRUNCATION_NOTICE)

        Log.info(f"Text content validated: {filename} ({len(text)} chars)")
        return ProcessedDocument(
            type=DocumentType.TEXT,
            text_content=text,
            metadata=DocumentMetadata(
                original_filename=filename,
                mime_type="text/plain",
                size=len(text),
            ),
            strategy=ProcessingStrategy.DIRECT_TEXT,
        )

    @staticmethod
    def _decode(content: str) -> str:
        if not content.startswith("data:text/"):
            return content
        data_url = parse_data_url(content)
        if data_url is None:
            return content
        return data_url.decode().decode("utf-8", errors="replace")


def smart_truncate(text: str, max_length: int, notice: str) -> str:
    """Cut *text* at the latest natural break before ``max_length - 100``.

    Break points are tried in order: paragraph, line, sentence end. A break
    earlier than 70% of the target is rejected in favour of the next kind;
    when nothing qualifies the text is hard-cut at the target.
    """
    if len(text) <= max_length:
        return text

    target = max_length - 100
    floor = target * 0.7

    # rfind end bounds include a separator that starts exactly at target.
    break_point = text.rfind("\n\n", 0, target + 2)
    if break_point == -1 or break_point < floor:
        break_point = text.rfind("\n", 0, target + 1)
    if break_point == -1 or break_point < floor:
        break_point = text.rfind(". ", 0, target + 2)
        if break_point != -1:
            break_point += 1
    if break_point == -1 or break_point < floor:
        break_point = target

    return text[:break_point].strip() + notice
