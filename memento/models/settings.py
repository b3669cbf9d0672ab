"""User settings as decoded values."""

from dataclasses import dataclass
from datetime import date, time
from typing import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from .language import Language
from .profile import BiologicalSex

DEFAULT_BIRTH_DATE = date(1990, 1, 1)
DEFAULT_NOTIFICATION_TIME = time(10, 0)


class AppSettings(BaseModel):
    """Everything the user can change. Immutable; edits produce a new instance."""

    model_config = ConfigDict(frozen=True)

    language: Language = Language.ENGLISH
    sex: BiologicalSex = BiologicalSex.MALE
    birth_date: date = DEFAULT_BIRTH_DATE
    notification_enabled: bool = True
    notification_time: time = DEFAULT_NOTIFICATION_TIME
    has_completed_onboarding: bool = False

    @field_validator("notification_time")
    @classmethod
    def truncate_seconds(cls, v: time) -> time:
        return time(v.hour, v.minute)

    @classmethod
    def defaults(
        cls,
        preferred_locales: Iterable[str] = (),
        notification_time: time = DEFAULT_NOTIFICATION_TIME,
    ) -> "AppSettings":
        return cls(
            language=Language.resolved_default(preferred_locales),
            notification_time=notification_time,
        )


@dataclass(frozen=True)
class SettingsTransition:
    """Result of diffing two settings snapshots.

    The caller performs persistence and rescheduling explicitly based on
    the two flags.
    """

    settings: AppSettings
    should_persist: bool
    should_reschedule: bool
