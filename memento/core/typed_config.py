"""
Typed configuration domain objects.

Immutable, Pydantic-validated views over the raw settings:
- LifespanTable  (lifespan.py, countdown.py)
- QuoteRecord / QuoteCatalog  (quote_corpus.py)
"""

import logging
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, field_validator

from ..models.language import Language
from ..models.profile import BiologicalSex

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Life expectancy
# ---------------------------------------------------------------------------

DEFAULT_EXPECTANCY_YEARS = 76.0


class LifespanTable(BaseModel):
    """Expectancy in years per biological sex, with a default for absent entries."""

    model_config = ConfigDict(frozen=True)

    values: Dict[BiologicalSex, float]
    default_years: float = DEFAULT_EXPECTANCY_YEARS

    @field_validator("values")
    @classmethod
    def values_positive(cls, v: Dict[BiologicalSex, float]) -> Dict[BiologicalSex, float]:
        for sex, years in v.items():
            if years <= 0:
                raise ValueError(f"expectancy for {sex.value} must be > 0, got {years}")
        return v

    @field_validator("default_years")
    @classmethod
    def default_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("default_years must be > 0")
        return v

    def years_for(self, sex: BiologicalSex) -> float:
        """Expectancy for ``sex``, falling back to ``default_years``."""
        if sex in self.values:
            return self.values[sex]
        logger.debug("No expectancy entry for %s, using default", sex)
        return self.default_years

    @classmethod
    def from_settings(cls, settings) -> "LifespanTable":
        return cls(
            values={
                BiologicalSex.MALE: settings.male_expectancy_years,
                BiologicalSex.FEMALE: settings.female_expectancy_years,
            },
            default_years=settings.default_expectancy_years,
        )


# ---------------------------------------------------------------------------
# Quote catalog
# ---------------------------------------------------------------------------


class QuoteRecord(BaseModel):
    """One quote entry as stored in quotes.yaml."""

    model_config = ConfigDict(frozen=True)

    id: int
    texts: Dict[Language, str]

    @field_validator("texts")
    @classmethod
    def texts_not_blank(cls, v: Dict[Language, str]) -> Dict[Language, str]:
        return {lang: text for lang, text in v.items() if text and text.strip()}


class QuoteCatalog(BaseModel):
    """Ordered quote entries. Order is the rotation order."""

    model_config = ConfigDict(frozen=True)

    quotes: List[QuoteRecord]

    @field_validator("quotes")
    @classmethod
    def ids_unique(cls, v: List[QuoteRecord]) -> List[QuoteRecord]:
        seen = set()
        for record in v:
            if record.id in seen:
                raise ValueError(f"duplicate quote id {record.id}")
            seen.add(record.id)
        return v
