from __future__ import annotations

from datetime import date, timedelta

from agenda.constants import (
    ALL_DAY_LABELS,
    DAY_NAMES,
    DEFAULT_LOCALE,
    MONTH_ABBREVIATIONS,
    NO_TIME_LABELS,
    SUPPORTED_LOCALES,
    TOMORROW_LABELS,
)
from agenda.events import Event


def resolve_locale(locale: str | None) -> str:
    value = (locale or "").strip().lower()[:2]
    return value if value in SUPPORTED_LOCALES else DEFAULT_LOCALE


def _day_month(day: date, locale: str) -> str:
    month = MONTH_ABBREVIATIONS[locale][day.month - 1]
    if locale == "en":
        return f"{month} {day.day}"
    return f"{day.day} {month}"


def day_label(day: date, today: date, locale: str | None = None) -> str:
    """Heading for a group of occurrences, e.g. ``Mañana, 5 oct``."""
    locale = resolve_locale(locale)
    if day == today + timedelta(days=1):
        return f"{TOMORROW_LABELS[locale]}, {_day_month(day, locale)}"
    weekday = DAY_NAMES[locale][day.weekday()]
    if locale == "en":
        return f"{weekday}, {_day_month(day, locale)}"
    return f"{weekday} {_day_month(day, locale)}"


def time_range_label(event: Event, locale: str | None = None) -> str:
    locale = resolve_locale(locale)
    if event.all_day:
        return ALL_DAY_LABELS[locale]
    if event.start_time and event.end_time:
        return f"{event.start_time} – {event.end_time}"
    return NO_TIME_LABELS[locale]
