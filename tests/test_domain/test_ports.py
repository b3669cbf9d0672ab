"""Tests that the in-memory adapters satisfy the domain ports."""

from memento.domain.ports import NotificationCenter, SettingsStore
from memento.infrastructure import InMemoryNotificationCenter, InMemorySettingsStore


class TestPortConformance:
    def test_notification_center(self):
        assert isinstance(InMemoryNotificationCenter(), NotificationCenter)

    def test_settings_store(self):
        assert isinstance(InMemorySettingsStore(), SettingsStore)

    def test_store_is_not_a_center(self):
        assert not isinstance(InMemorySettingsStore(), NotificationCenter)
