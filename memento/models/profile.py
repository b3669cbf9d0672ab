"""Biological sex and countdown value types."""

import enum
from dataclasses import dataclass
from datetime import date
from typing import Dict


class BiologicalSex(enum.Enum):
    MALE = "male"
    FEMALE = "female"

    @property
    def label_key(self) -> str:
        return _LABEL_KEYS[self]


_LABEL_KEYS: Dict[BiologicalSex, str] = {
    BiologicalSex.MALE: "sex.male",
    BiologicalSex.FEMALE: "sex.female",
}


@dataclass(frozen=True)
class CountdownResult:
    """Signed day count until the projected end date.

    ``days_left`` is the calendar-day difference between the reference day
    and ``projected_end_date``; it goes negative once the projection has
    passed ("bonus days").
    """

    days_left: int
    projected_end_date: date

    @property
    def is_bonus(self) -> bool:
        return self.days_left <= 0

    @property
    def absolute_days(self) -> int:
        return abs(self.days_left)
