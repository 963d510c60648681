"""Post-extraction normalization of contacts, emergency contacts and locations."""

import copy
import re
from dataclasses import asdict
from typing import ClassVar

from callsheet.extraction.models import Contact, ExtractionResult
from callsheet.logging.logger import Log
from callsheet.normalization.deduplicator import Deduplicator
from callsheet.normalization.models import (
    NormalizationConfig,
    NormalizationIssue,
    NormalizationResult,
    NormalizationStats,
)
from callsheet.normalization.name_normalizer import NameNormalizer
from callsheet.normalization.phone_normalizer import PhoneNormalizer
from callsheet.normalization.role_normalizer import RoleNormalizer


class ContactNormalizer:
    """Cleans a raw AI extraction without ever raising on malformed contacts.

    The input is deep-copied first, so the caller's raw extraction stays
    untouched and can be diffed against the result. Every problem found is
    reported as a warning issue next to a best-effort result.
    """

    LOW_CONFIDENCE_THRESHOLD: ClassVar[float] = 0.85
    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    def __init__(self, config: NormalizationConfig | None = None, **overrides: object) -> None:
        base = config or NormalizationConfig()
        self._config = base.with_overrides(**overrides) if overrides else base
        self._phones = PhoneNormalizer(self._config.default_country_code)
        self._names = NameNormalizer()
        self._roles = RoleNormalizer()
        self._deduplicator = Deduplicator()

    @property
    def config(self) -> NormalizationConfig:
        return self._config

    def normalize(self, extraction: ExtractionResult) -> NormalizationResult:
        Log.info(f"Starting data normalization: {len(extraction.contacts)} contacts")

        result = copy.deepcopy(extraction)
        stats = NormalizationStats(total_contacts=len(result.contacts))
        issues: list[NormalizationIssue] = []

        if not result.contacts:
            issues.append(NormalizationIssue(
                type="warning",
                field="contacts",
                message="No contacts were extracted. This might be a parsing error.",
            ))

        for contact in result.contacts:
            self._normalize_contact(contact, stats, issues)

        if self._config.deduplicate:
            deduped = self._deduplicator.deduplicate(result.contacts)
            result.contacts = deduped.contacts
            stats.duplicates_removed = deduped.removed_count

        if self._config.normalize_phones:
            for emergency_contact in result.emergency_contacts:
                emergency_contact.phone = self._phones.normalize(emergency_contact.phone)
            for location in result.locations:
                location.phone = self._phones.normalize(location.phone)

        stats.total_contacts = len(result.contacts)
        Log.info(f"Normalization complete: {asdict(stats)}, {len(issues)} issues")
        return NormalizationResult(data=result, stats=stats, issues=issues)

    def _normalize_contact(
        self,
        contact: Contact,
        stats: NormalizationStats,
        issues: list[NormalizationIssue],
    ) -> None:
        original_name = contact.name

        if self._config.normalize_names:
            normalized_name = self._names.normalize(contact.name)
            if normalized_name and normalized_name != contact.name:
                contact.name = normalized_name
                stats.names_normalized += 1
            if not self._names.is_valid(contact.name):
                issues.append(NormalizationIssue(
                    type="warning",
                    field="name",
                    contact_name=original_name,
                    message=f'Invalid or incomplete name: "{contact.name}"',
                ))

        if self._config.normalize_phones and contact.phone:
            normalized_phone = self._phones.normalize(contact.phone)
            if normalized_phone != contact.phone:
                contact.phone = normalized_phone
                stats.phones_normalized += 1
            if contact.phone and not self._phones.is_valid(contact.phone):
                issues.append(NormalizationIssue(
                    type="warning",
                    field="phone",
                    contact_name=contact.name,
                    message=f'Invalid phone number: "{contact.phone}"',
                ))

        if self._config.normalize_roles and contact.role:
            normalized_role = self._roles.normalize_role(contact.role)
            if normalized_role and normalized_role != contact.role:
                contact.role = normalized_role
                stats.roles_normalized += 1

        if self._config.infer_departments and not contact.department:
            inferred = self._roles.infer_department(contact.role, contact.department)
            if inferred:
                contact.department = inferred
                stats.departments_inferred += 1

        if contact.email:
            contact.email = contact.email.lower().strip()
            if not self._EMAIL_RE.match(contact.email):
                issues.append(NormalizationIssue(
                    type="warning",
                    field="email",
                    contact_name=contact.name,
                    message=f'Invalid email format: "{contact.email}"',
                ))

        if contact.confidence is not None and contact.confidence < self.LOW_CONFIDENCE_THRESHOLD:
            Log.warning(f"Low confidence extraction: {contact.name} ({contact.confidence})")
