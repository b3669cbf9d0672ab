"""
Daily reminder scheduling.

Computes the next fire instant for a recurring wall-clock time, builds the
notification payload (the quote for the day the reminder actually fires),
and keeps at most one pending reminder in the notification center under a
fixed identifier.
"""

import asyncio
import logging
from datetime import datetime, time, timezone, tzinfo
from typing import Optional

from dateutil.rrule import DAILY, MINUTELY, rrule
from dateutil.tz import datetime_exists, resolve_imaginary

from ..core.config import get_settings
from ..core.i18n import t
from ..domain.ports.notification_center import NotificationCenter
from ..models.language import Language
from ..models.notifications import (
    AuthorizationStatus,
    NotificationPayload,
    NotificationRequest,
    ReminderSpec,
)
from ..utils.logging import log_reminder_event
from .quote_rotator import QuoteRotator

logger = logging.getLogger(__name__)

# Today, tomorrow, and one spare day for DST edge cases
_SEARCH_DAYS = 3


def _gap_end(candidate: datetime) -> datetime:
    """First existing wall-clock minute after a skipped time."""
    shifted = resolve_imaginary(candidate)
    minutes = rrule(
        MINUTELY,
        dtstart=candidate.replace(tzinfo=None),
        until=shifted.replace(tzinfo=None),
    )
    for wall in minutes:
        aware = wall.replace(tzinfo=candidate.tzinfo)
        if datetime_exists(aware):
            return aware
    return shifted


def resolve_wall_time(wall: datetime, tz: tzinfo) -> datetime:
    """Aware instant for the naive wall-clock time ``wall`` in ``tz``.

    Repeated wall times (clocks turned back) resolve to the first
    occurrence. Skipped wall times (clocks turned forward) resolve to the
    instant the gap ends.
    """
    # fold=0 picks the earlier of two repeated instants
    candidate = wall.replace(tzinfo=tz, fold=0)
    if datetime_exists(candidate):
        return candidate
    return _gap_end(candidate)


def next_trigger(spec: ReminderSpec, reference: datetime) -> datetime:
    """Soonest instant strictly after ``reference`` at the reminder's wall clock time.

    Naive references are read as wall-clock time in ``spec.timezone``.
    One exception to "soonest": when ``reference`` falls in a repeated hour
    after the first occurrence of the wall time has passed, the second
    occurrence is skipped and the next day's time is returned, so a daily
    reminder never fires twice on the same calendar day.
    Returns ``reference`` unchanged if no instant can be resolved.
    """
    tz = spec.tzinfo
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=tz)

    try:
        wall_reference = reference.astimezone(tz).replace(tzinfo=None)
        # same-zone comparisons ignore fold, so compare in UTC
        reference_utc = reference.astimezone(timezone.utc)
        rule = rrule(
            DAILY,
            dtstart=datetime.combine(wall_reference.date(), time()),
            count=_SEARCH_DAYS,
            byhour=spec.hour,
            byminute=spec.minute,
            bysecond=0,
        )
        wall = rule.after(wall_reference, inc=False)
        while wall is not None:
            candidate = resolve_wall_time(wall, tz)
            if candidate > reference_utc:
                return candidate
            wall = rule.after(wall, inc=False)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning(f"Cannot compute next trigger after {reference}: {e}")
        return reference

    logger.warning(f"No trigger found for {spec.wall_time()} after {reference}")
    return reference


def build_payload(
    trigger: datetime, language: Language, rotator: QuoteRotator
) -> NotificationPayload:
    """Notification content for a reminder firing at ``trigger``.

    The quote is the one for the trigger's own calendar day, which is not
    necessarily today.
    """
    quote = rotator.quote_for(trigger, tz=trigger.tzinfo)
    return NotificationPayload(
        title=t("notification.title", language.locale_identifier),
        body=rotator.corpus.lookup(quote, language),
        trigger_instant=trigger,
        quote_id=quote.id,
    )


class ReminderScheduler:
    """Owns the single daily reminder in an injected NotificationCenter.

    States are "no reminder pending" and "one reminder pending". ``schedule``
    replaces whatever is pending; ``cancel`` clears it. Both run under one
    lock so overlapping calls apply in the order they were issued.
    """

    def __init__(
        self,
        center: NotificationCenter,
        rotator: Optional[QuoteRotator] = None,
        identifier: Optional[str] = None,
    ) -> None:
        self._center = center
        self._rotator = rotator or QuoteRotator()
        self.identifier = identifier or get_settings().reminder_identifier
        self._lock = asyncio.Lock()

    def next_trigger(self, spec: ReminderSpec, reference: datetime) -> datetime:
        return next_trigger(spec, reference)

    def build_payload(self, trigger: datetime, language: Language) -> NotificationPayload:
        return build_payload(trigger, language, self._rotator)

    async def request_authorization(self) -> bool:
        """Ask the user for permission. Failures count as a refusal."""
        try:
            granted = await self._center.request_authorization()
        except Exception as e:
            logger.error(f"Notification authorization request failed: {e}")
            return False
        logger.info(f"Notification authorization granted={granted}")
        return bool(granted)

    async def authorization_status(self) -> AuthorizationStatus:
        try:
            return await self._center.authorization_status()
        except Exception as e:
            logger.error(f"Failed to read notification settings: {e}")
            return AuthorizationStatus.NOT_DETERMINED

    async def has_permission(self) -> bool:
        return (await self.authorization_status()).allows_delivery

    async def schedule(
        self,
        spec: ReminderSpec,
        language: Language,
        reference: Optional[datetime] = None,
    ) -> bool:
        """Replace the pending reminder with one for ``spec``.

        Returns False (and leaves nothing pending) when permission is
        missing or the notification center fails.
        """
        async with self._lock:
            if not await self.has_permission():
                log_reminder_event("denied", identifier=self.identifier)
                await self._remove_pending()
                return False

            if reference is None:
                reference = datetime.now(spec.tzinfo)
            trigger = next_trigger(spec, reference)
            request = NotificationRequest(
                identifier=self.identifier,
                payload=self.build_payload(trigger, language),
                spec=spec,
            )

            try:
                await self._center.remove_pending([self.identifier])
                await self._center.add(request)
            except Exception as e:
                logger.error(f"Failed to schedule daily reminder: {e}")
                await self._remove_pending()
                return False

            log_reminder_event(
                "scheduled",
                identifier=self.identifier,
                wall_time=f"{spec.hour:02d}:{spec.minute:02d}",
                timezone=spec.timezone,
                trigger=trigger.isoformat(),
                quote_id=request.payload.quote_id,
            )
            return True

    async def schedule_at(
        self,
        hour: int,
        minute: int,
        language: Language,
        timezone: Optional[str] = None,
        reference: Optional[datetime] = None,
    ) -> bool:
        spec = ReminderSpec(
            hour=hour, minute=minute, timezone=timezone or get_settings().timezone
        )
        return await self.schedule(spec, language, reference)

    async def cancel(self) -> None:
        """Remove the pending reminder, if any."""
        async with self._lock:
            if await self._remove_pending():
                log_reminder_event("cancelled", identifier=self.identifier)

    async def pending(self) -> Optional[NotificationRequest]:
        try:
            requests = await self._center.pending_requests()
        except Exception as e:
            logger.error(f"Failed to list pending notifications: {e}")
            return None
        for request in requests:
            if request.identifier == self.identifier:
                return request
        return None

    async def _remove_pending(self) -> bool:
        try:
            await self._center.remove_pending([self.identifier])
        except Exception as e:
            logger.error(f"Failed to remove pending reminder: {e}")
            return False
        return True
