"""Pure settings transitions: what changed, and which side effects it needs."""

from datetime import date
from typing import Optional

from ..models.settings import AppSettings, SettingsTransition
from .lifespan import LifespanModel

# Fields whose change alters the pending reminder (its time or its text)
RESCHEDULE_FIELDS = ("language", "notification_enabled", "notification_time")


def update_settings(
    current: AppSettings,
    new: AppSettings,
    lifespan: Optional[LifespanModel] = None,
    today: Optional[date] = None,
) -> SettingsTransition:
    """Diff ``new`` against ``current``.

    The birth date is clamped into the accepted range before diffing. No
    side effects: the caller persists when ``should_persist`` and
    reschedules when ``should_reschedule``.
    """
    lifespan = lifespan or LifespanModel()
    clamped = lifespan.clamp_birth_date(new.birth_date, today)
    if clamped != new.birth_date:
        new = new.model_copy(update={"birth_date": clamped})

    reschedule = any(getattr(current, f) != getattr(new, f) for f in RESCHEDULE_FIELDS)
    return SettingsTransition(
        settings=new,
        should_persist=new != current,
        should_reschedule=reschedule,
    )
