from abc import ABC, abstractmethod
from dataclasses import dataclass

from callsheet.document.models import ProcessedDocument
from callsheet.extraction.models import ExtractionResult
from callsheet.normalization.models import NormalizationResult


@dataclass(slots=True)
class PipelineContext:
    content: str
    filename: str
    mime_hint: str | None = None
    document: ProcessedDocument | None = None
    raw_extraction: ExtractionResult | None = None
    normalization_result: NormalizationResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
