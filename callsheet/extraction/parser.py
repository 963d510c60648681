"""Builds an ExtractionResult from the model's parsed JSON.

The model output is treated as unreliable: structural problems (a non-object
payload, a list field that is not a list) are rejected, everything else is
coerced. Missing lists become empty, non-string scalars become None and
contacts without a usable name are dropped.
"""

from typing import Any

from callsheet.extraction.exceptions import ExtractionValidationError
from callsheet.extraction.models import (
    Contact,
    EmergencyContact,
    ExtractionResult,
    Location,
    ProductionInfo,
)
from callsheet.logging.logger import Log


def parse_extraction(data: Any) -> ExtractionResult:
    """Build an ExtractionResult from parsed JSON.

    Raises:
        ExtractionValidationError: if the payload or one of its lists has the wrong type.
    """
    if not isinstance(data, dict):
        raise ExtractionValidationError("Extraction result must be a JSON object")

    contacts: list[Contact] = []
    for i, item in enumerate(_list_field(data, "contacts")):
        contact = _build_contact(item, i)
        if contact is not None:
            contacts.append(contact)

    emergency_contacts: list[EmergencyContact] = []
    for i, item in enumerate(_list_field(data, "emergency_contacts")):
        emergency_contact = _build_emergency_contact(item, i)
        if emergency_contact is not None:
            emergency_contacts.append(emergency_contact)

    locations: list[Location] = []
    for item in _list_field(data, "locations"):
        location = _build_location(item)
        if location is not None:
            locations.append(location)

    return ExtractionResult(
        production_info=_build_production_info(data.get("production_info")),
        contacts=contacts,
        emergency_contacts=emergency_contacts,
        locations=locations,
    )


def _list_field(data: dict[str, Any], name: str) -> list[Any]:
    raw = data.get(name)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ExtractionValidationError(f"'{name}' must be a list")
    return raw


def _text(raw: Any) -> str | None:
    if not isinstance(raw, str):
        return None
    stripped = raw.strip()
    return stripped or None


def _build_production_info(raw: Any) -> ProductionInfo:
    if not isinstance(raw, dict):
        return ProductionInfo()
    return ProductionInfo(
        title=_text(raw.get("title")),
        production_company=_text(raw.get("production_company")),
        shoot_date=_text(raw.get("shoot_date")),
    )


def _build_contact(raw: Any, index: int) -> Contact | None:
    if not isinstance(raw, dict):
        Log.warning(f"Skipping contact at index {index}: not an object")
        return None
    name = _text(raw.get("name"))
    if name is None:
        Log.warning(f"Skipping contact at index {index}: missing name")
        return None
    return Contact(
        name=name,
        role=_text(raw.get("role")),
        department=_text(raw.get("department")),
        phone=_text(raw.get("phone")),
        email=_text(raw.get("email")),
        notes=_text(raw.get("notes")),
        confidence=_confidence(raw.get("confidence")),
    )


def _confidence(raw: Any) -> float | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    return max(0.0, min(1.0, float(raw)))


def _build_emergency_contact(raw: Any, index: int) -> EmergencyContact | None:
    if not isinstance(raw, dict):
        return None
    name = _text(raw.get("name"))
    phone = _text(raw.get("phone"))
    service_type = _text(raw.get("type"))
    if service_type is None:
        if name is None and phone is None:
            Log.warning(f"Skipping empty emergency contact at index {index}")
            return None
        service_type = "Unknown"
    return EmergencyContact(type=service_type, name=name, phone=phone)


def _build_location(raw: Any) -> Location | None:
    if not isinstance(raw, dict):
        return None
    location = Location(
        name=_text(raw.get("name")),
        address=_text(raw.get("address")),
        phone=_text(raw.get("phone")),
    )
    if location.name is None and location.address is None and location.phone is None:
        return None
    return location
