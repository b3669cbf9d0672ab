"""Domain port protocols for decoupling services from platform collaborators."""

from .notification_center import NotificationCenter
from .settings_store import SettingsStore

__all__ = ["NotificationCenter", "SettingsStore"]
