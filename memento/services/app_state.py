"""
Application coordinator.

Holds the current settings and wires them to the countdown, the quote
rotation and the daily reminder. Persistence and rescheduling happen only
through ``apply``, driven by the flags of a pure settings transition.
"""

import logging
from datetime import time
from typing import Any, Iterable, Optional

from ..core.config import get_settings
from ..domain.ports.settings_store import SettingsStore
from ..models.language import Language
from ..models.notifications import ReminderSpec
from ..models.profile import CountdownResult
from ..models.quote import Quote
from ..models.settings import AppSettings, SettingsTransition
from .countdown import CountdownEngine
from .lifespan import LifespanModel
from .quote_rotator import Moment, QuoteRotator
from .reminder_scheduler import ReminderScheduler
from .settings_transition import update_settings

logger = logging.getLogger(__name__)


class MementoApp:
    """Settings-driven facade over the countdown, quote and reminder services."""

    def __init__(
        self,
        store: SettingsStore,
        scheduler: ReminderScheduler,
        rotator: Optional[QuoteRotator] = None,
        lifespan: Optional[LifespanModel] = None,
        engine: Optional[CountdownEngine] = None,
        preferred_locales: Iterable[str] = (),
        timezone: Optional[str] = None,
    ) -> None:
        config = get_settings()
        self._store = store
        self.scheduler = scheduler
        self.rotator = rotator or QuoteRotator()
        self.lifespan = lifespan or LifespanModel()
        self.engine = engine or CountdownEngine(self.lifespan)
        self.timezone = timezone or config.timezone

        stored = store.load()
        if stored is None:
            logger.info("No stored settings, starting from defaults")
            stored = AppSettings.defaults(
                preferred_locales,
                notification_time=time(
                    config.default_reminder_hour, config.default_reminder_minute
                ),
            )
        self._settings = stored

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # -- reads ---------------------------------------------------------------

    def quote_for(self, moment: Optional[Moment] = None) -> Quote:
        return self.rotator.quote_for(moment)

    def quote_text(self, moment: Optional[Moment] = None) -> str:
        return self.rotator.text_for(moment, self._settings.language)

    def countdown(self, reference: Optional[Moment] = None) -> CountdownResult:
        return self.engine.result(self._settings.birth_date, self._settings.sex, reference)

    def reminder_spec(self) -> ReminderSpec:
        return ReminderSpec.from_time(self._settings.notification_time, self.timezone)

    # -- writes --------------------------------------------------------------

    async def apply(self, new: AppSettings) -> SettingsTransition:
        """Adopt ``new`` settings, persisting and rescheduling as required."""
        transition = update_settings(self._settings, new, self.lifespan)
        self._settings = transition.settings

        if transition.should_persist:
            try:
                self._store.save(transition.settings)
            except Exception as e:
                logger.error(f"Failed to persist settings: {e}")

        if transition.should_reschedule:
            await self.refresh_reminder()
        return transition

    async def update(self, **changes: Any) -> SettingsTransition:
        """Apply a partial change, e.g. ``update(language=Language.SPANISH)``."""
        return await self.apply(AppSettings(**{**self._settings.model_dump(), **changes}))

    async def toggle_language(self) -> Language:
        await self.update(language=self._settings.language.next())
        return self._settings.language

    async def complete_onboarding(self) -> None:
        await self.update(has_completed_onboarding=True)

    # -- reminders -----------------------------------------------------------

    async def refresh_reminder(self) -> bool:
        """Bring the pending reminder in line with the current settings."""
        if not self._settings.notification_enabled:
            await self.scheduler.cancel()
            return False
        return await self.scheduler.schedule(self.reminder_spec(), self._settings.language)

    async def configure_on_launch(self) -> None:
        """Reconcile the reminder with the permission state at startup."""
        if await self.scheduler.has_permission():
            await self.refresh_reminder()
            return

        await self.scheduler.cancel()
        if self._settings.notification_enabled:
            logger.info("Notification permission missing, turning reminders off")
            await self.update(notification_enabled=False)

    async def request_notification_authorization(self) -> bool:
        """Prompt for permission and record the answer as the reminder toggle."""
        granted = await self.scheduler.request_authorization()
        transition = await self.update(notification_enabled=granted)
        if not transition.should_reschedule:
            await self.refresh_reminder()
        return granted
