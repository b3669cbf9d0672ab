from .in_memory_notification_center import InMemoryNotificationCenter
from .in_memory_settings_store import InMemorySettingsStore

__all__ = [
    "InMemoryNotificationCenter",
    "InMemorySettingsStore",
]
