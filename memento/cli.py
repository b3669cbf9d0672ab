"""
Command line interface for memento.

    memento countdown --birth-date 1990-01-01 --sex female
    memento quote --language es
    memento next-reminder --time 08:00 --timezone Europe/Madrid
    memento languages --current ja
"""

import asyncio
from datetime import date, datetime, time
from typing import Optional

import typer

from .core.config import get_settings, get_timezone
from .core.i18n import t
from .infrastructure.in_memory_notification_center import InMemoryNotificationCenter
from .models.language import Language
from .models.notifications import AuthorizationStatus, ReminderSpec
from .models.profile import BiologicalSex
from .services.countdown import CountdownEngine
from .services.quote_rotator import QuoteRotator
from .services.reminder_scheduler import ReminderScheduler
from .utils.logging import setup_logging

app = typer.Typer(help="Memento mori: days left, a quote a day, and a daily reminder.")


def _parse_language(value: str) -> Language:
    try:
        return Language(value)
    except ValueError:
        choices = ", ".join(lang.value for lang in Language)
        raise typer.BadParameter(f"'{value}' is not one of: {choices}")


def _parse_sex(value: str) -> BiologicalSex:
    try:
        return BiologicalSex(value.lower())
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not one of: male, female")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not a YYYY-MM-DD date")


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not an ISO datetime")


def _parse_wall_time(value: str) -> time:
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not a valid HH:MM time")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, log_to_file=settings.log_to_file)


@app.command()
def countdown(
    birth_date: str = typer.Option(..., help="Birth date, YYYY-MM-DD"),
    sex: str = typer.Option("male", help="male or female"),
    reference: Optional[str] = typer.Option(None, help="Count from this date instead of today"),
    language: str = typer.Option("en", help="en, zh-Hans, es or ja"),
):
    """Show days left until the projected end date."""
    lang = _parse_language(language)
    locale = lang.locale_identifier
    born = _parse_date(birth_date)
    ref = _parse_date(reference) if reference else None

    result = CountdownEngine().result(born, _parse_sex(sex), ref)

    label = "countdown.label.bonus" if result.is_bonus else "countdown.label.remaining"
    typer.echo(f"{t(label, locale)}: {t('countdown.days', locale, count=result.absolute_days)}")
    typer.echo(t("countdown.end_date", locale, date=result.projected_end_date.isoformat()))


@app.command()
def quote(
    on: Optional[str] = typer.Option(None, "--date", help="Day to show, YYYY-MM-DD"),
    language: str = typer.Option("en", help="en, zh-Hans, es or ja"),
):
    """Show the quote of the day."""
    rotator = QuoteRotator()
    day = _parse_date(on) if on else datetime.now(get_timezone()).date()
    lang = _parse_language(language)
    selected = rotator.quote_for(day)
    typer.echo(f"#{selected.id} {rotator.corpus.lookup(selected, lang)}")


@app.command("next-reminder")
def next_reminder(
    at: str = typer.Option(..., "--time", help="Reminder wall-clock time, HH:MM"),
    timezone: Optional[str] = typer.Option(None, help="IANA timezone (default from settings)"),
    language: str = typer.Option("en", help="en, zh-Hans, es or ja"),
    reference: Optional[str] = typer.Option(None, help="ISO datetime to schedule from"),
):
    """Preview the next daily reminder: when it fires and what it says."""
    lang = _parse_language(language)
    wall = _parse_wall_time(at)
    try:
        spec = ReminderSpec.from_time(wall, timezone or get_settings().timezone)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    ref = _parse_datetime(reference) if reference else None

    center = InMemoryNotificationCenter(status=AuthorizationStatus.AUTHORIZED)
    scheduler = ReminderScheduler(center)
    asyncio.run(scheduler.schedule(spec, lang, reference=ref))
    pending = center.get(scheduler.identifier)
    if pending is None:
        typer.echo(t("reminder.disabled", lang.locale_identifier))
        raise typer.Exit(code=1)

    payload = pending.payload
    typer.echo(t("reminder.next", lang.locale_identifier, when=payload.trigger_instant.isoformat()))
    typer.echo(payload.title)
    typer.echo(payload.body)


@app.command()
def languages(
    current: str = typer.Option("en", help="Start from this language"),
):
    """List languages in toggle order, starting after the current one."""
    lang = _parse_language(current)
    for _ in range(len(Language)):
        lang = lang.next()
        typer.echo(f"{lang.value}\t{t(lang.display_key, lang.locale_identifier)}")


if __name__ == "__main__":
    app()
