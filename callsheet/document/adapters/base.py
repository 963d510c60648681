from abc import ABC, abstractmethod
from typing import ClassVar

from callsheet.document.exceptions import DocumentProcessingError, InsufficientContentError
from callsheet.document.models import ProcessedDocument, ProcessorResult
from callsheet.logging.logger import Log


class BaseDocumentAdapter(ABC):
    """Contract for all format adapters.

    Subclasses implement ``can_process`` and ``_process``; ``_process`` raises
    ``DocumentProcessingError`` subclasses, which ``process`` turns into a
    failed ``ProcessorResult`` so that callers never see an exception.
    """

    label: ClassVar[str] = "Document"

    @abstractmethod
    def can_process(self, content: str, mime_hint: str | None = None) -> bool:
        """Return True if this adapter claims the content."""

    @abstractmethod
    def _process(self, content: str, filename: str) -> ProcessedDocument:
        """Build a ProcessedDocument or raise DocumentProcessingError."""

    def process(self, content: str, filename: str) -> ProcessorResult:
        Log.info(f"Processing {self.label} document: {filename}")
        try:
            document = self._process(content, filename)
        except DocumentProcessingError as exc:
            Log.warning(f"{self.label} document rejected ({exc.kind}): {exc}")
            return ProcessorResult.failure(str(exc), exc.kind)
        except Exception as exc:
            Log.error(f"{self.label} document processing failed for {filename}: {exc}")
            return ProcessorResult.failure(f"{self.label} document processing failed: {exc}")
        return ProcessorResult.ok(document)


def require_min_length(text: str, min_length: int, message: str) -> None:
    """Raise InsufficientContentError when stripped *text* is too short.

    *message* may reference ``{length}`` and ``{min_length}``.
    """
    length = len(text.strip())
    if length < min_length:
        raise InsufficientContentError(message.format(length=length, min_length=min_length))


def truncate(text: str, max_length: int, marker: str) -> str:
    """Hard-cut *text* at *max_length* and append *marker*."""
    if len(text) <= max_length:
        return text
    Log.info(f"Truncating large document: {len(text)} -> {max_length} chars")
    return text[:max_length] + marker
