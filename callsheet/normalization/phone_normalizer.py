import re
from typing import ClassVar


class PhoneNormalizer:
    """Formats phone numbers by digit count.

    10 digits (or 11 with a leading 1) become ``(AAA) EEE-SSSS``, 7 digits
    ``EEE-SSSS``, more than 11 ``+<digits>``; anything else is returned as
    bare digits.
    """

    _KEEP_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\d+]")
    _NON_DIGIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\D")

    def __init__(self, default_country_code: str = "1") -> None:
        self.default_country_code = default_country_code

    def normalize(self, phone: str | None) -> str | None:
        if not phone:
            return None

        # A leading "+" survives the first pass but is dropped before branching,
        # so "+1..." and "1..." 11-digit numbers format the same.
        cleaned = self._KEEP_RE.sub("", phone)
        digits = self._NON_DIGIT_RE.sub("", cleaned)

        if not digits:
            return None
        if len(digits) == 10:
            return self._format_national(digits)
        if len(digits) == 11 and digits.startswith("1"):
            return self._format_national(digits[1:])
        if len(digits) > 11:
            return f"+{digits}"
        if len(digits) == 7:
            return f"{digits[:3]}-{digits[3:]}"
        return digits

    def is_valid(self, phone: str | None) -> bool:
        if not phone:
            return False
        digits = self._NON_DIGIT_RE.sub("", phone)
        return 7 <= len(digits) <= 15

    @staticmethod
    def _format_national(digits: str) -> str:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:10]}"
