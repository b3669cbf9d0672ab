"""Countdown engine: days between today and the projected end date."""

import logging
from datetime import datetime, tzinfo
from typing import Optional

from ..core.config import get_timezone
from ..models.profile import BiologicalSex, CountdownResult
from .lifespan import LifespanModel
from .quote_rotator import Moment, calendar_day

logger = logging.getLogger(__name__)


class CountdownEngine:
    """Pure function of (birth date, sex, reference instant) plus the lifespan table."""

    def __init__(
        self, lifespan: Optional[LifespanModel] = None, tz: Optional[tzinfo] = None
    ) -> None:
        self.lifespan = lifespan or LifespanModel()
        self.tz = tz or get_timezone()

    def result(
        self,
        birth_date: Moment,
        sex: BiologicalSex,
        reference: Optional[Moment] = None,
    ) -> CountdownResult:
        """Compute the countdown as of ``reference`` (default: now).

        Both ends are compared as calendar days in the engine's timezone,
        so the time of day never shifts the count.
        """
        if reference is None:
            reference = datetime.now(self.tz)

        end_date = self.lifespan.projected_end_date(calendar_day(birth_date, self.tz), sex)
        today = calendar_day(reference, self.tz)
        return CountdownResult(days_left=(end_date - today).days, projected_end_date=end_date)


def countdown(
    birth_date: Moment, sex: BiologicalSex, reference: Optional[Moment] = None
) -> CountdownResult:
    """Countdown with the configured table and timezone."""
    return CountdownEngine().result(birth_date, sex, reference)
