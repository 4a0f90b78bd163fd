from __future__ import annotations

import calendar
import logging
import re
from datetime import MINYEAR, date, datetime, timedelta

from agenda.constants import RECURRENCE_NONE
from agenda.events import Event, is_known_recurrence

logger = logging.getLogger(__name__)

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_iso_date(value) -> date | None:
    """Parse a ``YYYY-MM-DD`` value, returning ``None`` instead of raising."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    match = _ISO_DATE_RE.fullmatch(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    if year < MINYEAR or not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


def to_iso(value) -> str | None:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


def week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def calendar_weeks_between(start: date, end: date) -> int:
    """Number of Monday-starting calendar weeks from ``start`` to ``end``."""
    return (week_start(end) - week_start(start)).days // 7


def occurs_on(event: Event, target) -> bool:
    """Return True when ``event`` shows on ``target`` (ISO string or date).

    Exception dates are checked first, so an exception can hide the origin
    date itself. Any missing or unparsable date yields False.
    """
    origin_iso = event.origin_date
    target_iso = to_iso(target)
    if not origin_iso or not target_iso:
        return False
    if target_iso in event.exception_dates:
        return False

    origin = parse_iso_date(origin_iso)
    if origin is None:
        logger.debug("Event %s has an unparsable origin date %r", event.id, origin_iso)
        return False
    target_day = parse_iso_date(target_iso)
    if target_day is None:
        return False

    if target_day == origin:
        return True
    if event.recurrence == RECURRENCE_NONE:
        return False
    if target_day < origin:
        return False
    return _matches_pattern(event.recurrence, origin, target_day, event.id)


def _matches_pattern(recurrence: str, origin: date, target: date, event_id: str = "") -> bool:
    if recurrence == "daily":
        return True
    if recurrence == "weekly":
        return target.weekday() == origin.weekday()
    if recurrence == "biweekly":
        if target.weekday() != origin.weekday():
            return False
        return calendar_weeks_between(origin, target) % 2 == 0
    if recurrence == "monthly":
        # No rollover: day 31 never matches a 30-day month.
        return target.day == origin.day
    if recurrence == "yearly":
        return target.day == origin.day and target.month == origin.month
    if not is_known_recurrence(recurrence):
        logger.debug("Event %s has unknown recurrence %r", event_id, recurrence)
    return False
