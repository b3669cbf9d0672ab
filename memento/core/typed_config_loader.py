"""
Typed config loader: parses packaged YAML / settings into typed domain objects.

Each loader reads a specific source and returns an immutable Pydantic
model.  Cached singleton accessors (`get_*`) are provided for production use.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..domain.errors import QuoteCorpusLoadError
from .config import get_settings
from .typed_config import LifespanTable, QuoteCatalog

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent.parent

# ---------------------------------------------------------------------------
# Raw YAML loading helper
# ---------------------------------------------------------------------------


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise QuoteCorpusLoadError(str(path), "file not found")
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise QuoteCorpusLoadError(str(path), str(e)) from e


# ---------------------------------------------------------------------------
# Quote catalog
# ---------------------------------------------------------------------------


def load_quote_catalog(path: Optional[Path] = None) -> QuoteCatalog:
    """Parse quotes.yaml into a QuoteCatalog."""
    if path is None:
        path = PACKAGE_ROOT / "data" / "quotes.yaml"

    raw = _load_yaml(path)
    if not isinstance(raw, dict):
        raise QuoteCorpusLoadError(str(path), "expected a mapping with a 'quotes' list")
    try:
        catalog = QuoteCatalog(quotes=raw.get("quotes", []))
    except ValidationError as e:
        raise QuoteCorpusLoadError(str(path), str(e)) from e

    logger.info("Loaded %d quotes from %s", len(catalog.quotes), path)
    return catalog


@lru_cache()
def get_quote_catalog() -> QuoteCatalog:
    return load_quote_catalog()


# ---------------------------------------------------------------------------
# Lifespan table
# ---------------------------------------------------------------------------


@lru_cache()
def get_lifespan_table() -> LifespanTable:
    return LifespanTable.from_settings(get_settings())
