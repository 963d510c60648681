from dataclasses import dataclass, field, replace
from typing import Literal

from callsheet.extraction.models import ExtractionResult


@dataclass(frozen=True)
class NormalizationConfig:
    """Independently togglable normalization steps."""

    normalize_phones: bool = True
    normalize_names: bool = True
    normalize_roles: bool = True
    infer_departments: bool = True
    deduplicate: bool = True
    default_country_code: str = "1"

    def with_overrides(self, **overrides: object) -> "NormalizationConfig":
        return replace(self, **overrides)  # type: ignore[arg-type]


@dataclass
class NormalizationStats:
    phones_normalized: int = 0
    names_normalized: int = 0
    roles_normalized: int = 0
    departments_inferred: int = 0
    duplicates_removed: int = 0
    total_contacts: int = 0


@dataclass(frozen=True)
class NormalizationIssue:
    """Advisory finding; never blocks the result."""

    type: Literal["warning", "error"]
    field: str
    message: str
    contact_name: str | None = None


@dataclass
class NormalizationResult:
    data: ExtractionResult
    stats: NormalizationStats = field(default_factory=NormalizationStats)
    issues: list[NormalizationIssue] = field(default_factory=list)
