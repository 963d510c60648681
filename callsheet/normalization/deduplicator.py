import re
from dataclasses import dataclass, fields, replace
from typing import ClassVar

from callsheet.extraction.models import Contact


@dataclass(frozen=True)
class DeduplicationResult:
    contacts: list[Contact]
    removed_count: int


class Deduplicator:
    """Merges contacts that share a name plus phone or email.

    The first record seen for a key is authoritative: later duplicates only
    fill its empty fields, and their notes are appended.
    """

    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    _NON_DIGIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\D")

    def deduplicate(self, contacts: list[Contact]) -> DeduplicationResult:
        merged: dict[str, Contact] = {}
        for contact in contacts:
            key = self.key(contact)
            existing = merged.get(key)
            if existing is None:
                merged[key] = replace(contact)
            else:
                merged[key] = self._merge(existing, contact)
        return DeduplicationResult(
            contacts=list(merged.values()),
            removed_count=len(contacts) - len(merged),
        )

    def key(self, contact: Contact) -> str:
        name = self._WHITESPACE_RE.sub(" ", contact.name.lower().strip())
        phone_digits = self._NON_DIGIT_RE.sub("", contact.phone or "")
        email = (contact.email or "").lower().strip()

        if len(phone_digits) >= 7:
            return f"{name}|{phone_digits}"
        if email:
            return f"{name}|{email}"
        return name

    def _merge(self, existing: Contact, incoming: Contact) -> Contact:
        values: dict[str, object] = {}
        for f in fields(Contact):
            if f.name == "notes":
                continue
            current = getattr(existing, f.name)
            values[f.name] = current if current is not None else getattr(incoming, f.name)
        values["notes"] = _merge_notes(existing.notes, incoming.notes)
        return Contact(**values)  # type: ignore[arg-type]


def _merge_notes(existing: str | None, incoming: str | None) -> str | None:
    if not existing and not incoming:
        return None
    if not existing:
        return incoming
    if not incoming or existing == incoming:
        return existing
    return f"{existing}; {incoming}"
