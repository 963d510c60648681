import re
from typing import ClassVar

from callsheet.document.adapters.base import BaseDocumentAdapter
from callsheet.document.data_url import approximate_decoded_size
from callsheet.document.exceptions import (
    InvalidInputFormatError,
    PayloadTooLargeError,
    UnsupportedFormatError,
)
from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
)
from callsheet.logging.logger import Log


class ImageAdapter(BaseDocumentAdapter):
    """Validates image data URLs and passes them through for vision."""

    label: ClassVar[str] = "Image"

    SUPPORTED_MIME_TYPES: ClassVar[frozenset[str]] = frozenset({
        "image/png",
        "image/jpeg",
        "image/jpg",
        "image/gif",
        "image/webp",
    })
    MAX_IMAGE_SIZE: ClassVar[int] = 20 * 1024 * 1024

    _IMAGE_URL_RE: ClassVar[re.Pattern[str]] = re.compile(r"^data:(image/[a-z]+);base64,")

    def can_process(self, content: str, mime_hint: str | None = None) -> bool:
        return content.startswith("data:image/") or mime_hint in self.SUPPORTED_MIME_TYPES

    def _process(self, content: str, filename: str) -> ProcessedDocument:
        match = self._IMAGE_URL_RE.match(content)
        if match is None:
            raise InvalidInputFormatError("Invalid image data URL format")

        mime_type = match.group(1)
        if mime_type not in self.SUPPORTED_MIME_TYPES:
            raise UnsupportedFormatError(
                f"Unsupported image type: {mime_type}. Supported: PNG, JPG, GIF, WebP"
            )

        size = approximate_decoded_size(content[match.end():])
        if size > self.MAX_IMAGE_SIZE:
            raise PayloadTooLargeError(
                f"Image too large ({size / 1024 / 1024:.1f}MB). Maximum size is 20MB."
            )

        Log.info(f"Image validated: {filename} ({mime_type}, {size / 1024:.1f}KB)")
        return ProcessedDocument(
            type=DocumentType.IMAGE,
            images=[content],
            metadata=DocumentMetadata(
                original_filename=filename,
                mime_type=mime_type,
                size=size,
            ),
            strategy=ProcessingStrategy.VISION,
        )
