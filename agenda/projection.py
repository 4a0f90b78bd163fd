from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, List

from agenda.events import Event
from agenda.recurrence import occurs_on, parse_iso_date


def iter_dates(start: date, count: int) -> Iterator[date]:
    for offset in range(max(count, 0)):
        yield start + timedelta(days=offset)


def calendar_marks(events: Iterable[Event], range_start, range_length_days: int) -> Dict[str, bool]:
    """Mark every date in the window that has at least one occurrence.

    Cost is days x events, fine for month-sized calendar views.
    """
    start = parse_iso_date(range_start)
    if start is None or range_length_days <= 0:
        return {}
    items = list(events)
    marks = {}
    for day in iter_dates(start, range_length_days):
        key = day.isoformat()
        marks[key] = any(occurs_on(event, key) for event in items)
    return marks


def marked_dates(events: Iterable[Event], range_start, range_length_days: int) -> List[str]:
    return [key for key, marked in calendar_marks(events, range_start, range_length_days).items() if marked]


def _day_agenda_key(event: Event):
    return (event.all_day, event.sort_time)


def events_on(events: Iterable[Event], day) -> List[Event]:
    """Events showing on ``day``: timed ones by start time, then all-day ones."""
    matches = [event for event in events if occurs_on(event, day)]
    return sorted(matches, key=_day_agenda_key)
