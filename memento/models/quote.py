"""Quote value type."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .language import FALLBACK_LANGUAGE, Language

logger = logging.getLogger(__name__)

MISSING_TEXT = ""


@dataclass(frozen=True)
class Quote:
    """A single quote with one text per language.

    Ids are stable but not contiguous; position in the corpus, not the id,
    decides which day a quote is shown.
    """

    id: int
    texts: Mapping[Language, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "texts", MappingProxyType(dict(self.texts)))

    def text(self, language: Language) -> str:
        """Resolve text for a language.

        Fallback order: exact language → English → first declared text →
        ``MISSING_TEXT`` (empty string) when the quote has no texts at all.
        """
        if language in self.texts:
            return self.texts[language]
        if FALLBACK_LANGUAGE in self.texts:
            return self.texts[FALLBACK_LANGUAGE]
        for value in self.texts.values():
            return value
        logger.debug(f"Quote {self.id} has no text for any language")
        return MISSING_TEXT
