from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from itertools import groupby
from typing import Iterable, List

from agenda.constants import DEFAULT_LOOKAHEAD_DAYS
from agenda.events import Event
from agenda.labels import day_label
from agenda.recurrence import occurs_on, parse_iso_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectedOccurrence:
    date: date
    event: Event

    @property
    def sort_key(self):
        return (self.date, self.event.sort_time)


@dataclass
class UpcomingGroup:
    date: date
    label: str
    events: List[Event] = field(default_factory=list)


def project_occurrences(events: Iterable[Event], today, lookahead_days: int) -> List[ProjectedOccurrence]:
    """Occurrences after ``today``, sorted by date then start time.

    Single events are projected at their origin date whenever it is in the
    future. Recurring events are tested day by day over the lookahead window
    and may appear once per matching day.
    """
    today_day = parse_iso_date(today)
    if today_day is None:
        return []
    items = list(events)
    projected = []

    for event in items:
        if event.is_recurring:
            continue
        origin = parse_iso_date(event.origin_date)
        if origin is None or origin <= today_day:
            continue
        if occurs_on(event, origin):
            projected.append(ProjectedOccurrence(origin, event))

    recurring = [event for event in items if event.is_recurring]
    if recurring:
        for offset in range(1, lookahead_days + 1):
            day = today_day + timedelta(days=offset)
            day_iso = day.isoformat()
            for event in recurring:
                if occurs_on(event, day_iso):
                    projected.append(ProjectedOccurrence(day, event))

    projected.sort(key=lambda item: item.sort_key)
    return projected


def upcoming(
    events: Iterable[Event],
    today,
    lookahead_days: int = DEFAULT_LOOKAHEAD_DAYS,
    locale: str | None = None,
) -> List[UpcomingGroup]:
    today_day = parse_iso_date(today)
    if today_day is None:
        logger.warning("Cannot build upcoming list for invalid date %r", today)
        return []
    occurrences = project_occurrences(events, today_day, lookahead_days)
    groups = []
    for day, items in groupby(occurrences, key=lambda item: item.date):
        groups.append(
            UpcomingGroup(
                date=day,
                label=day_label(day, today_day, locale),
                events=[item.event for item in items],
            )
        )
    return groups
