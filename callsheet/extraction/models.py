from dataclasses import asdict, dataclass, field


@dataclass
class ProductionInfo:
    title: str | None = None
    production_company: str | None = None
    shoot_date: str | None = None


@dataclass
class Contact:
    """A crew or cast contact. Only ``name`` is required."""

    name: str
    role: str | None = None
    department: str | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None
    confidence: float | None = None


@dataclass
class EmergencyContact:
    type: str
    name: str | None = None
    phone: str | None = None


@dataclass
class Location:
    name: str | None = None
    address: str | None = None
    phone: str | None = None


@dataclass
class ExtractionResult:
    """Shape shared by the raw AI output and the normalized output."""

    production_info: ProductionInfo = field(default_factory=ProductionInfo)
    contacts: list[Contact] = field(default_factory=list)
    emergency_contacts: list[EmergencyContact] = field(default_factory=list)
    locations: list[Location] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
