"""
Daily quote rotation.

Maps a calendar day to a corpus entry: the number of days since a fixed
anchor date, taken modulo the corpus size. Every instant within the same
local calendar day resolves to the same quote.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional, Tuple, Union

from ..core.config import get_settings, get_timezone
from ..models.language import Language
from ..models.quote import Quote
from .quote_corpus import QuoteCorpus, get_default_corpus

logger = logging.getLogger(__name__)

Moment = Union[date, datetime]


def calendar_day(moment: Moment, tz: tzinfo) -> date:
    """Truncate ``moment`` to its calendar day in ``tz``.

    Plain dates are already days. Naive datetimes are taken as wall-clock
    time in ``tz``; aware datetimes are converted first.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            try:
                moment = moment.astimezone(tz)
            except OverflowError:
                logger.warning("Cannot convert %s to %s, using its own day", moment, tz)
        return moment.date()
    return moment


def rotation_index(day: date, anchor: date, size: int) -> int:
    """Corpus position for ``day``; always within [0, size)."""
    diff_days = (day - anchor).days
    # floor modulo: days before the anchor wrap from the end of the corpus
    return diff_days % size


@dataclass
class DayCache:
    """Single-slot memo of the last (day, quote) pair."""

    entry: Optional[Tuple[date, Quote]] = None

    def get(self, day: date) -> Optional[Quote]:
        entry = self.entry
        if entry is not None and entry[0] == day:
            return entry[1]
        return None

    def store(self, day: date, quote: Quote) -> None:
        self.entry = (day, quote)

    def clear(self) -> None:
        self.entry = None


class QuoteRotator:
    """Deterministic quote-of-the-day selector."""

    def __init__(
        self,
        corpus: Optional[QuoteCorpus] = None,
        anchor: Optional[date] = None,
        tz: Optional[tzinfo] = None,
        use_cache: bool = True,
    ) -> None:
        self.corpus = corpus or get_default_corpus()
        self.anchor = anchor or get_settings().rotation_anchor_date
        self.tz = tz or get_timezone()
        self._cache: Optional[DayCache] = DayCache() if use_cache else None

    def quote_for(self, moment: Optional[Moment] = None, tz: Optional[tzinfo] = None) -> Quote:
        """Quote shown on the calendar day containing ``moment`` (default: now).

        Args:
            moment: A date, or a datetime to normalize to its day.
            tz: Calendar timezone override (defaults to the rotator's).
        """
        zone = tz or self.tz
        if moment is None:
            moment = datetime.now(zone)
        day = calendar_day(moment, zone)

        if self._cache is not None:
            cached = self._cache.get(day)
            if cached is not None:
                return cached

        quote = self.corpus[rotation_index(day, self.anchor, len(self.corpus))]
        if self._cache is not None:
            self._cache.store(day, quote)
        return quote

    def text_for(
        self, moment: Optional[Moment], language: Language, tz: Optional[tzinfo] = None
    ) -> str:
        return self.corpus.lookup(self.quote_for(moment, tz=tz), language)
