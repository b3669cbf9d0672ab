"""
Life expectancy model.

Projects an end date from a birth date: whole expectancy years are added
as calendar years, the fractional remainder as days of a mean Gregorian year.
"""

import logging
import math
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from ..core.config import get_settings, get_timezone
from ..core.typed_config import LifespanTable
from ..core.typed_config_loader import get_lifespan_table
from ..models.profile import BiologicalSex

logger = logging.getLogger(__name__)

DAYS_PER_GREGORIAN_YEAR = 365.2425


def round_half_up(value: float) -> int:
    """Round to nearest, ties away from zero (0.5 -> 1, -0.5 -> -1)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class LifespanModel:
    """Expectancy lookup and end-date projection."""

    def __init__(
        self,
        table: Optional[LifespanTable] = None,
        birth_date_min: Optional[date] = None,
    ) -> None:
        self.table = table or get_lifespan_table()
        self.birth_date_min = birth_date_min or get_settings().birth_date_min

    def expectancy_years(self, sex: BiologicalSex) -> float:
        return self.table.years_for(sex)

    def projected_end_date(self, birth_date: date, sex: BiologicalSex) -> date:
        """Birth date plus the expectancy for ``sex``.

        Feb 29 birthdays land on Feb 28 in non-leap target years. If a step
        leaves the representable date range, the value before that step is
        returned instead.
        """
        years = self.expectancy_years(sex)
        whole_years = int(years)
        extra_days = round_half_up((years - whole_years) * DAYS_PER_GREGORIAN_YEAR)

        try:
            end_date = birth_date + relativedelta(years=whole_years)
        except (OverflowError, ValueError) as e:
            logger.warning(f"Cannot add {whole_years} years to {birth_date}: {e}")
            return birth_date

        try:
            return end_date + timedelta(days=extra_days)
        except OverflowError as e:
            logger.warning(f"Cannot add {extra_days} days to {end_date}: {e}")
            return end_date

    def birth_date_bounds(self, today: Optional[date] = None) -> Tuple[date, date]:
        """Accepted birth date range: the configured minimum through today."""
        if today is None:
            today = datetime.now(get_timezone()).date()
        return self.birth_date_min, max(today, self.birth_date_min)

    def clamp_birth_date(self, value: date, today: Optional[date] = None) -> date:
        low, high = self.birth_date_bounds(today)
        return min(max(value, low), high)
