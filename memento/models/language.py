"""Supported interface/content languages."""

import enum
from typing import Dict, Iterable


class Language(enum.Enum):
    """Closed, ordered set of languages. Definition order drives ``next()``."""

    ENGLISH = "en"
    SIMPLIFIED_CHINESE = "zh-Hans"
    SPANISH = "es"
    JAPANESE = "ja"

    @property
    def locale_identifier(self) -> str:
        return self.value

    @property
    def display_key(self) -> str:
        """Translation key for the language's own display name."""
        return _DISPLAY_KEYS[self]

    def next(self) -> "Language":
        """Cyclic advance through the fixed language order."""
        ordered = list(Language)
        return ordered[(ordered.index(self) + 1) % len(ordered)]

    @classmethod
    def resolved_default(cls, preferred_locales: Iterable[str]) -> "Language":
        """Pick a language from the platform's preferred locale identifiers.

        Each identifier is checked for zh, es, ja and en (in that order);
        the first identifier with a match wins. English otherwise.
        """
        for identifier in preferred_locales:
            lowered = identifier.lower()
            if "zh" in lowered:
                return cls.SIMPLIFIED_CHINESE
            if "es" in lowered:
                return cls.SPANISH
            if "ja" in lowered:
                return cls.JAPANESE
            if "en" in lowered:
                return cls.ENGLISH
        return cls.ENGLISH


_DISPLAY_KEYS: Dict[Language, str] = {
    Language.ENGLISH: "language.en",
    Language.SIMPLIFIED_CHINESE: "language.zh",
    Language.SPANISH: "language.es",
    Language.JAPANESE: "language.ja",
}

FALLBACK_LANGUAGE = Language.ENGLISH
