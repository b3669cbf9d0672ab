"""SettingsStore port -- abstracts where user settings are kept between runs."""

from typing import Optional, Protocol, runtime_checkable

from ...models.settings import AppSettings


@runtime_checkable
class SettingsStore(Protocol):
    """Loads and saves decoded AppSettings; the storage encoding stays behind it."""

    def load(self) -> Optional[AppSettings]:
        """Return stored settings, or None when nothing has been saved yet."""
        ...

    def save(self, settings: AppSettings) -> None: ...
