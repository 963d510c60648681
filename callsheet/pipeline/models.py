from dataclasses import asdict, dataclass, field

from callsheet.document.models import ProcessedDocument
from callsheet.extraction.models import ExtractionResult
from callsheet.normalization.models import NormalizationIssue, NormalizationStats


@dataclass(frozen=True)
class ExtractContactsResult:
    """Raw and normalized extraction side by side, with the engine's report."""

    document: ProcessedDocument
    raw: ExtractionResult
    normalized: ExtractionResult
    stats: NormalizationStats
    issues: list[NormalizationIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "document": self.document.summary(),
            "raw": self.raw.to_dict(),
            "normalized": self.normalized.to_dict(),
            "stats": asdict(self.stats),
            "issues": [asdict(issue) for issue in self.issues],
        }
