from callsheet.document.models import (
    DocumentMetadata,
    DocumentType,
    ProcessedDocument,
    ProcessingStrategy,
    ProcessorResult,
)
from callsheet.document.router import DocumentRouter, build_router, detect_type

__all__ = [
    "DocumentMetadata",
    "DocumentRouter",
    "DocumentType",
    "ProcessedDocument",
    "ProcessingStrategy",
    "ProcessorResult",
    "build_router",
    "detect_type",
]
