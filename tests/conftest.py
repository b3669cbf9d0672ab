import logging
import os
from datetime import date
from zoneinfo import ZoneInfo

import pytest

# Set test environment variables
os.environ["MEMENTO_LOG_LEVEL"] = "WARNING"
os.environ.pop("MEMENTO_TIMEZONE", None)

from memento.core.config import get_settings  # noqa: E402
from memento.core.typed_config import LifespanTable  # noqa: E402
from memento.core.typed_config_loader import (  # noqa: E402
    get_lifespan_table,
    get_quote_catalog,
)
from memento.infrastructure import (  # noqa: E402
    InMemoryNotificationCenter,
    InMemorySettingsStore,
)
from memento.models import (  # noqa: E402
    AuthorizationStatus,
    BiologicalSex,
    Language,
    Quote,
)
from memento.services.lifespan import LifespanModel  # noqa: E402
from memento.services.quote_corpus import QuoteCorpus, get_default_corpus  # noqa: E402
from memento.services.quote_rotator import QuoteRotator  # noqa: E402

UTC = ZoneInfo("UTC")
ANCHOR = date(2024, 1, 1)


@pytest.fixture(autouse=True)
def _reset_config_caches():
    """Drop cached settings so env changes in one test don't leak into another."""
    for cached in (get_settings, get_lifespan_table, get_quote_catalog, get_default_corpus):
        cached.cache_clear()
    yield
    for cached in (get_settings, get_lifespan_table, get_quote_catalog, get_default_corpus):
        cached.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)


@pytest.fixture
def small_corpus():
    """Three quotes: full, missing Japanese, English only."""
    return QuoteCorpus(
        [
            Quote(
                id=10,
                texts={
                    Language.ENGLISH: "ten",
                    Language.SIMPLIFIED_CHINESE: "十",
                    Language.SPANISH: "diez",
                    Language.JAPANESE: "じゅう",
                },
            ),
            Quote(
                id=20,
                texts={
                    Language.ENGLISH: "twenty",
                    Language.SPANISH: "veinte",
                },
            ),
            Quote(id=30, texts={Language.ENGLISH: "thirty"}),
        ]
    )


@pytest.fixture
def rotator(small_corpus):
    return QuoteRotator(corpus=small_corpus, anchor=ANCHOR, tz=UTC)


@pytest.fixture
def lifespan():
    table = LifespanTable(
        values={BiologicalSex.MALE: 73.5, BiologicalSex.FEMALE: 79.3},
        default_years=76.0,
    )
    return LifespanModel(table=table, birth_date_min=date(1940, 1, 1))


@pytest.fixture
def authorized_center():
    return InMemoryNotificationCenter(status=AuthorizationStatus.AUTHORIZED)


@pytest.fixture
def denied_center():
    return InMemoryNotificationCenter(status=AuthorizationStatus.DENIED)


@pytest.fixture
def settings_store():
    return InMemorySettingsStore()
