"""Tests for daily quote rotation."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from memento.models import Language
from memento.services.quote_rotator import (
    DayCache,
    QuoteRotator,
    calendar_day,
    rotation_index,
)

UTC = ZoneInfo("UTC")
TOKYO = ZoneInfo("Asia/Tokyo")
ANCHOR = date(2024, 1, 1)


class TestRotationIndex:
    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2024, 1, 1), 0),
            (date(2024, 1, 2), 1),
            (date(2024, 1, 3), 2),
            (date(2024, 1, 4), 0),
            (date(2023, 12, 31), 2),
            (date(2023, 12, 29), 0),
        ],
    )
    def test_modulo_size(self, day, expected):
        assert rotation_index(day, ANCHOR, 3) == expected

    def test_always_in_range(self):
        for offset in range(-50, 50):
            index = rotation_index(ANCHOR + timedelta(days=offset), ANCHOR, 7)
            assert 0 <= index < 7

    def test_single_quote_corpus(self):
        assert rotation_index(date(1999, 5, 5), ANCHOR, 1) == 0


class TestCalendarDay:
    def test_plain_date_unchanged(self):
        assert calendar_day(date(2024, 3, 1), TOKYO) == date(2024, 3, 1)

    def test_aware_datetime_converted(self):
        # 20:00 UTC is already the next morning in Tokyo
        moment = datetime(2024, 3, 1, 20, 0, tzinfo=UTC)
        assert calendar_day(moment, TOKYO) == date(2024, 3, 2)

    def test_naive_datetime_is_wall_clock(self):
        assert calendar_day(datetime(2024, 3, 1, 23, 59), TOKYO) == date(2024, 3, 1)


class TestDayCache:
    def test_hit_and_miss(self, small_corpus):
        cache = DayCache()
        assert cache.get(ANCHOR) is None
        cache.store(ANCHOR, small_corpus[0])
        assert cache.get(ANCHOR) is small_corpus[0]
        assert cache.get(ANCHOR + timedelta(days=1)) is None

    def test_single_slot(self, small_corpus):
        cache = DayCache()
        cache.store(ANCHOR, small_corpus[0])
        cache.store(ANCHOR + timedelta(days=1), small_corpus[1])
        assert cache.get(ANCHOR) is None

    def test_clear(self, small_corpus):
        cache = DayCache()
        cache.store(ANCHOR, small_corpus[0])
        cache.clear()
        assert cache.entry is None


class TestQuoteRotator:
    @pytest.mark.parametrize(
        "day,expected_id",
        [
            (date(2024, 1, 1), 10),
            (date(2024, 1, 2), 20),
            (date(2024, 1, 3), 30),
            (date(2024, 1, 4), 10),
            (date(2023, 12, 31), 30),
        ],
    )
    def test_quote_for_day(self, rotator, day, expected_id):
        assert rotator.quote_for(day).id == expected_id

    def test_same_day_same_quote(self, rotator):
        morning = datetime(2024, 1, 2, 0, 0, tzinfo=UTC)
        night = datetime(2024, 1, 2, 23, 59, 59, tzinfo=UTC)
        assert rotator.quote_for(morning) == rotator.quote_for(night)

    def test_cache_does_not_change_results(self, small_corpus):
        cached = QuoteRotator(corpus=small_corpus, anchor=ANCHOR, tz=UTC)
        uncached = QuoteRotator(corpus=small_corpus, anchor=ANCHOR, tz=UTC, use_cache=False)
        days = [ANCHOR + timedelta(days=n) for n in (0, 0, 1, 5, 1, -3, -3)]
        assert [cached.quote_for(d).id for d in days] == [uncached.quote_for(d).id for d in days]

    def test_timezone_override(self, rotator):
        moment = datetime(2024, 1, 1, 20, 0, tzinfo=UTC)
        assert rotator.quote_for(moment).id == 10
        assert rotator.quote_for(moment, tz=TOKYO).id == 20

    def test_defaults_to_now(self, rotator):
        today = datetime.now(UTC).date()
        assert rotator.quote_for() == rotator.quote_for(today)

    def test_text_for(self, rotator):
        assert rotator.text_for(date(2024, 1, 1), Language.SPANISH) == "diez"
        assert rotator.text_for(date(2024, 1, 2), Language.JAPANESE) == "twenty"


class TestDefaultRotation:
    @pytest.mark.parametrize(
        "day,expected_id",
        [
            (date(2024, 1, 1), 1),
            (date(2024, 1, 2), 2),
            (date(2023, 12, 31), 35),
            (date(2024, 1, 21), 1),
        ],
    )
    def test_packaged_corpus(self, day, expected_id):
        assert QuoteRotator(tz=UTC).quote_for(day).id == expected_id

    def test_anchor_from_environment(self, monkeypatch):
        monkeypatch.setenv("MEMENTO_ROTATION_ANCHOR_DATE", "2024-01-02")
        assert QuoteRotator(tz=UTC).quote_for(date(2024, 1, 2)).id == 1


class TestRotationRange:
    def test_century_either_side_of_anchor(self):
        rotator = QuoteRotator(tz=UTC)
        ids = {q.id for q in rotator.corpus}
        for offset in range(-36525, 36526):
            assert rotator.quote_for(ANCHOR + timedelta(days=offset)).id in ids

    @pytest.mark.parametrize(
        "moment",
        [
            date.min,
            date.max,
            datetime.min.replace(tzinfo=UTC),
            datetime.max.replace(tzinfo=UTC),
        ],
    )
    def test_calendar_extremes(self, moment):
        rotator = QuoteRotator(tz=UTC)
        assert rotator.quote_for(moment) in rotator.corpus.all_quotes()

    @pytest.mark.parametrize("k", [-1826, -3, -1, 1, 2, 50, 1826])
    @pytest.mark.parametrize("start", [0, 7, 19])
    def test_period_is_corpus_size(self, k, start):
        rotator = QuoteRotator(tz=UTC)
        size = len(rotator.corpus)
        day = ANCHOR + timedelta(days=start)
        assert rotator.quote_for(day + timedelta(days=k * size)) == rotator.quote_for(day)
