import re
from typing import ClassVar


class NameNormalizer:
    """Title-cases person names, keeping Mc/Mac/O' and name particles intact."""

    PARTICLES: ClassVar[frozenset[str]] = frozenset({
        "de", "del", "della", "di", "da", "van", "von", "der", "den", "la", "le", "du",
    })
    SPECIAL_PREFIXES: ClassVar[tuple[str, ...]] = ("mc", "mac", "o'")

    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    _LETTER_RE: ClassVar[re.Pattern[str]] = re.compile(r"[a-zA-Z]")

    def normalize(self, name: str | None) -> str | None:
        if not name:
            return None
        collapsed = self._WHITESPACE_RE.sub(" ", name.strip())
        if not collapsed:
            return None
        return " ".join(
            self._normalize_word(word, index) for index, word in enumerate(collapsed.split(" "))
        )

    def is_valid(self, name: str | None) -> bool:
        if not name:
            return False
        trimmed = name.strip()
        return len(trimmed) >= 2 and self._LETTER_RE.search(trimmed) is not None

    def _normalize_word(self, word: str, index: int) -> str:
        lower = word.lower()
        for prefix in self.SPECIAL_PREFIXES:
            if lower.startswith(prefix) and len(lower) > len(prefix):
                rest = word[len(prefix):]
                if prefix == "o'":
                    return "O'" + _capitalize(rest)
                return _capitalize(prefix) + _capitalize(rest)

        if index > 0 and lower in self.PARTICLES:
            return lower

        if "-" in word:
            return "-".join(_capitalize(part) for part in word.split("-"))

        return _capitalize(word)


def _capitalize(word: str) -> str:
    """Title-case the first character, lower-case the rest.

    ``title()`` keeps the result stable for characters such as ``ß`` whose
    upper-case form is two letters.
    """
    if not word:
        return word
    return word[0].title() + word[1:].lower()
