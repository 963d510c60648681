from callsheet.extraction.extractor import ContactExtractor
from callsheet.extraction.factory import ExtractorFactory
from callsheet.extraction.models import (
    Contact,
    EmergencyContact,
    ExtractionResult,
    Location,
    ProductionInfo,
)
from callsheet.extraction.parser import parse_extraction

__all__ = [
    "Contact",
    "ContactExtractor",
    "EmergencyContact",
    "ExtractionResult",
    "ExtractorFactory",
    "Location",
    "ProductionInfo",
    "parse_extraction",
]
