from callsheet.normalization.deduplicator import Deduplicator
from callsheet.normalization.models import (
    NormalizationConfig,
    NormalizationIssue,
    NormalizationResult,
    NormalizationStats,
)
from callsheet.normalization.name_normalizer import NameNormalizer
from callsheet.normalization.normalizer import ContactNormalizer
from callsheet.normalization.phone_normalizer import PhoneNormalizer
from callsheet.normalization.role_normalizer import RoleNormalizer

__all__ = [
    "ContactNormalizer",
    "Deduplicator",
    "NameNormalizer",
    "NormalizationConfig",
    "NormalizationIssue",
    "NormalizationResult",
    "NormalizationStats",
    "PhoneNormalizer",
    "RoleNormalizer",
]
