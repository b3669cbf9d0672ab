from .language import FALLBACK_LANGUAGE, Language
from .notifications import (
    AuthorizationStatus,
    NotificationPayload,
    NotificationRequest,
    ReminderSpec,
)
from .profile import BiologicalSex, CountdownResult
from .quote import MISSING_TEXT, Quote
from .settings import AppSettings, SettingsTransition

__all__ = [
    "AppSettings",
    "AuthorizationStatus",
    "BiologicalSex",
    "CountdownResult",
    "FALLBACK_LANGUAGE",
    "Language",
    "MISSING_TEXT",
    "NotificationPayload",
    "NotificationRequest",
    "Quote",
    "ReminderSpec",
    "SettingsTransition",
]
