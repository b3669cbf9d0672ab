"""Reminder and notification value types."""

import enum
from dataclasses import dataclass
from datetime import datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, field_validator


class AuthorizationStatus(enum.Enum):
    NOT_DETERMINED = "not_determined"
    DENIED = "denied"
    AUTHORIZED = "authorized"
    PROVISIONAL = "provisional"
    EPHEMERAL = "ephemeral"

    @property
    def allows_delivery(self) -> bool:
        return self in _DELIVERABLE


_DELIVERABLE = {
    AuthorizationStatus.AUTHORIZED,
    AuthorizationStatus.PROVISIONAL,
    AuthorizationStatus.EPHEMERAL,
}


class ReminderSpec(BaseModel):
    """Daily wall-clock reminder time in a named timezone. Seconds are always 0."""

    model_config = ConfigDict(frozen=True)

    hour: int
    minute: int
    timezone: str = "UTC"
    repeats: bool = True

    @field_validator("hour")
    @classmethod
    def hour_in_range(cls, v: int) -> int:
        if not 0 <= v <= 23:
            raise ValueError(f"hour must be within 0-23, got {v}")
        return v

    @field_validator("minute")
    @classmethod
    def minute_in_range(cls, v: int) -> int:
        if not 0 <= v <= 59:
            raise ValueError(f"minute must be within 0-59, got {v}")
        return v

    @field_validator("timezone")
    @classmethod
    def timezone_known(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone '{v}': {e}")
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def second(self) -> int:
        return 0

    def wall_time(self) -> time:
        return time(self.hour, self.minute)

    @classmethod
    def from_time(cls, wall: time, timezone: str = "UTC") -> "ReminderSpec":
        """Build from a wall-clock time, dropping seconds and microseconds."""
        return cls(hour=wall.hour, minute=wall.minute, timezone=timezone)


@dataclass(frozen=True)
class NotificationPayload:
    title: str
    body: str
    trigger_instant: datetime
    quote_id: int


@dataclass(frozen=True)
class NotificationRequest:
    """What gets handed to the notification center for one pending reminder."""

    identifier: str
    payload: NotificationPayload
    spec: ReminderSpec
