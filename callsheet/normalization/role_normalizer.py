"""Role standardization and department inference for film/photo crews."""

from types import MappingProxyType
from typing import Mapping

# Order matters: the first entry whose key occurs inside a role wins the
# substring fallback.
ROLE_MAPPINGS: Mapping[str, str] = MappingProxyType({
    # Camera
    "dp": "Director of Photography",
    "dop": "Director of Photography",
    "1st ac": "1st Assistant Camera",
    "2nd ac": "2nd Assistant Camera",
    "a/c": "Assistant Camera",
    "ac": "Assistant Camera",
    "cam op": "Camera Operator",
    "steadicam": "Steadicam Operator",
    "digi tech": "Digital Technician",
    "dit": "Digital Imaging Technician",
    # Grip / Electric
    "gaffer": "Gaffer",
    "key grip": "Key Grip",
    "best boy": "Best Boy",
    "best boy electric": "Best Boy Electric",
    "best boy grip": "Best Boy Grip",
    "grip": "Grip",
    "electric": "Electric",
    # Production
    "ad": "Assistant Director",
    "1st ad": "1st Assistant Director",
    "2nd ad": "2nd Assistant Director",
    "pa": "Production Assistant",
    "pm": "Production Manager",
    "upm": "Unit Production Manager",
    "lm": "Location Manager",
    "loc manager": "Location Manager",
    # Art
    "prod designer": "Production Designer",
    "art director": "Art Director",
    "set dresser": "Set Dresser",
    "prop master": "Property Master",
    "prop stylist": "Prop Stylist",
    "props": "Props",
    "prop asst": "Prop Assistant",
    # Hair / Makeup / Wardrobe
    "hmu": "Hair & Makeup",
    "hmua": "Hair & Makeup Artist",
    "mua": "Makeup Artist",
    "hair/makeup": "Hair & Makeup",
    "groomer": "Groomer",
    "wardrobe": "Wardrobe Stylist",
    "wardrobe asst": "Wardrobe Assistant",
    "stylist": "Stylist",
    # Sound
    "sound": "Sound Mixer",
    "audio": "Audio",
    "boom op": "Boom Operator",
    "sound mixer": "Sound Mixer",
    # Photo
    "photo": "Photographer",
    "photographer": "Photographer",
    "photo asst": "Photo Assistant",
    "photo assistant": "Photo Assistant",
    "digital tech": "Digital Technician",
    # Other
    "bts": "Behind The Scenes",
    "craft services": "Craft Services",
    "crafty": "Craft Services",
    "medic": "Set Medic",
    "covid officer": "COVID Compliance Officer",
})

DEPARTMENT_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Camera": ("camera", "dp", "dop", "ac", "steadicam", "dit", "digi", "photo", "photographer"),
    "Grip & Electric": ("grip", "gaffer", "electric", "best boy", "lighting"),
    "Production": ("producer", "production", "ad", "assistant director", "coordinator", "pm", "upm"),
    "Art": ("art", "prop", "set", "scenic", "designer", "decorator"),
    "Hair & Makeup": ("hair", "makeup", "hmu", "mua", "groomer", "beauty"),
    "Wardrobe": ("wardrobe", "costume", "stylist"),
    "Sound": ("sound", "audio", "boom", "mixer"),
    "Locations": ("location", "loc manager"),
    "Transport": ("driver", "transport", "picture car"),
    "Talent": ("talent", "actor", "actress", "model", "cast"),
    "Creative": ("director", "creative", "writer"),
    "Video": ("video", "editor", "post"),
})

_CANONICAL_ROLES: Mapping[str, str] = MappingProxyType(
    {full.lower(): full for full in ROLE_MAPPINGS.values()}
)


class RoleNormalizer:
    def normalize_role(self, role: str | None) -> str | None:
        """Expand a known abbreviation, else Title-Case the role."""
        if not role:
            return None
        trimmed = role.strip()
        if not trimmed:
            return None

        lower = trimmed.lower()
        exact = ROLE_MAPPINGS.get(lower)
        if exact is not None:
            return exact
        canonical = _CANONICAL_ROLES.get(lower)
        if canonical is not None:
            return canonical

        for abbreviation, full in ROLE_MAPPINGS.items():
            if abbreviation in lower:
                return full

        return " ".join(word[:1].title() + word[1:].lower() for word in trimmed.split(" "))

    def infer_department(self, role: str | None, existing_department: str | None) -> str | None:
        """Return the existing department, or the first keyword match for *role*.

        Returns None when nothing matches; callers must not invent one.
        """
        if existing_department and existing_department.strip():
            return existing_department
        if not role:
            return None

        lower = role.lower()
        for department, keywords in DEPARTMENT_KEYWORDS.items():
            if any(keyword in lower for keyword in keywords):
                return department
        return None
