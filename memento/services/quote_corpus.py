"""Quote corpus: the fixed, ordered set of daily quotes plus text lookup."""

import logging
from functools import lru_cache
from typing import Iterator, Optional, Sequence, Tuple

from ..core.typed_config import QuoteCatalog
from ..core.typed_config_loader import get_quote_catalog
from ..domain.errors import EmptyCorpusError
from ..models.language import Language
from ..models.quote import Quote

logger = logging.getLogger(__name__)


class QuoteCorpus:
    """Immutable ordered sequence of quotes. Must contain at least one quote."""

    def __init__(self, quotes: Sequence[Quote], source: str = "corpus") -> None:
        self._quotes: Tuple[Quote, ...] = tuple(quotes)
        if not self._quotes:
            raise EmptyCorpusError(source)

    @classmethod
    def from_catalog(cls, catalog: QuoteCatalog, source: str = "catalog") -> "QuoteCorpus":
        return cls(
            [Quote(id=record.id, texts=record.texts) for record in catalog.quotes],
            source=source,
        )

    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[Quote]:
        return iter(self._quotes)

    def __getitem__(self, index: int) -> Quote:
        return self._quotes[index]

    def all_quotes(self) -> Tuple[Quote, ...]:
        return self._quotes

    def get(self, quote_id: int) -> Optional[Quote]:
        """Find a quote by id (not by rotation position)."""
        for quote in self._quotes:
            if quote.id == quote_id:
                return quote
        return None

    def lookup(self, quote: Quote, language: Language) -> str:
        """Text for ``language`` with English / first-available fallback.

        Returns an empty string only for a quote that carries no text at all.
        """
        return quote.text(language)


@lru_cache()
def get_default_corpus() -> QuoteCorpus:
    """Corpus built from the packaged quotes.yaml."""
    corpus = QuoteCorpus.from_catalog(get_quote_catalog(), source="quotes.yaml")
    logger.debug("Default quote corpus ready (%d quotes)", len(corpus))
    return corpus
