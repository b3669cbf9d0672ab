"""In-memory SettingsStore for the CLI and tests."""

from typing import Optional

from ..models.settings import AppSettings


class InMemorySettingsStore:
    """Concrete SettingsStore holding the last saved snapshot."""

    def __init__(self, initial: Optional[AppSettings] = None) -> None:
        self._settings = initial
        self.save_count = 0

    def load(self) -> Optional[AppSettings]:
        return self._settings

    def save(self, settings: AppSettings) -> None:
        self._settings = settings
        self.save_count += 1
