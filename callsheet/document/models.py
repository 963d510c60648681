from dataclasses import dataclass
from enum import Enum


class DocumentType(str, Enum):
    """Routing tag derived from content markers and MIME hints."""

    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"
    UNKNOWN = "unknown"


class ProcessingStrategy(str, Enum):
    """Extraction method selected for a processed document."""

    TEXT_EXTRACTION = "text-extraction"
    VISION = "vision"
    DIRECT_TEXT = "direct-text"


@dataclass(frozen=True)
class DocumentMetadata:
    original_filename: str
    mime_type: str
    size: int
    page_count: int | None = None


@dataclass(frozen=True)
class ProcessedDocument:
    """Canonical router output: text content or page images, never both."""

    type: DocumentType
    metadata: DocumentMetadata
    strategy: ProcessingStrategy
    text_content: str | None = None
    images: list[str] | None = None

    def __post_init__(self) -> None:
        has_text = bool(self.text_content)
        has_images = bool(self.images)
        if has_text == has_images:
            raise ValueError(
                "ProcessedDocument requires exactly one of text_content or images"
            )

    @property
    def requires_vision(self) -> bool:
        return bool(self.images)

    def summary(self) -> dict[str, object]:
        """JSON-ready description without the (potentially large) payload."""
        return {
            "type": self.type.value,
            "strategy": self.strategy.value,
            "requires_vision": self.requires_vision,
            "text_length": len(self.text_content or ""),
            "image_count": len(self.images or []),
            "metadata": {
                "original_filename": self.metadata.original_filename,
                "mime_type": self.metadata.mime_type,
                "size": self.metadata.size,
                "page_count": self.metadata.page_count,
            },
        }


@dataclass(frozen=True)
class ProcessorResult:
    """Success/failure envelope returned by every adapter and the router."""

    success: bool
    document: ProcessedDocument | None = None
    error: str | None = None
    error_kind: str | None = None

    @classmethod
    def ok(cls, document: ProcessedDocument) -> "ProcessorResult":
        return cls(success=True, document=document)

    @classmethod
    def failure(cls, error: str, error_kind: str | None = None) -> "ProcessorResult":
        return cls(success=False, error=error, error_kind=error_kind)
