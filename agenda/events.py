from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional

from agenda.constants import RECURRENCE_NONE, RECURRING_KINDS, TIME_FORMAT

# Column names used by the stored "eventos" table, mapped to Event fields.
LEGACY_FIELD_ALIASES = {
    "fecha": "origin_date",
    "titulo": "title",
    "descripcion": "description",
    "es_todo_el_dia": "all_day",
    "hora_inicio": "start_time",
    "hora_fin": "end_time",
}

TRUE_STRINGS = {"true", "1", "yes", "t", "y"}
FALSE_STRINGS = {"false", "0", "no", "f", "n", ""}


@dataclass(frozen=True)
class Event:
    id: str
    origin_date: Optional[str]
    recurrence: str = RECURRENCE_NONE
    exception_dates: frozenset = field(default_factory=frozenset)
    all_day: bool = True
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    title: str = ""
    description: str = ""
    video_url: Optional[str] = None

    @property
    def is_recurring(self) -> bool:
        return self.recurrence != RECURRENCE_NONE

    @property
    def sort_time(self) -> str:
        return self.start_time or ""

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "Event":
        """Build an event from a raw row as returned by the events table.

        Accepts both the snake_case field names and the stored column names
        (``fecha``, ``hora_inicio`` ...). Dates are kept as strings so that a
        corrupt value survives normalization and simply never occurs.
        """
        payload = {}
        for key, value in dict(row or {}).items():
            payload[LEGACY_FIELD_ALIASES.get(key, key)] = value

        start_time = _normalize_time_value(payload.get("start_time"))
        end_time = _normalize_time_value(payload.get("end_time"))
        all_day = _normalize_bool_value(payload.get("all_day"))
        if all_day is None:
            all_day = start_time is None
        if all_day:
            start_time = None
            end_time = None

        return cls(
            id=str(payload.get("id") or ""),
            origin_date=_normalize_date_value(payload.get("origin_date")),
            recurrence=normalize_recurrence(payload.get("recurrence")),
            exception_dates=frozenset(_normalize_exception_dates(payload.get("exception_dates"))),
            all_day=all_day,
            start_time=start_time,
            end_time=end_time,
            title=str(payload.get("title") or ""),
            description=str(payload.get("description") or ""),
            video_url=str(payload["video_url"]) if payload.get("video_url") else None,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "origin_date": self.origin_date,
            "recurrence": self.recurrence,
            "exception_dates": sorted(self.exception_dates),
            "all_day": self.all_day,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "title": self.title,
            "description": self.description,
            "video_url": self.video_url,
        }


def normalize_recurrence(value) -> str:
    if value is None:
        return RECURRENCE_NONE
    value_str = str(value).strip().lower()
    return value_str or RECURRENCE_NONE


def is_known_recurrence(value: str) -> bool:
    return value == RECURRENCE_NONE or value in RECURRING_KINDS


def exclude_occurrence(event: Event, day) -> Event:
    """Return a copy of ``event`` that no longer shows on ``day``."""
    day_iso = _normalize_date_value(day)
    if not day_iso or day_iso in event.exception_dates:
        return event
    return replace(event, exception_dates=event.exception_dates | {day_iso})


def _normalize_date_value(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    value_str = str(value).strip()
    return value_str or None


def _normalize_time_value(value) -> Optional[str]:
    if value is None:
        return None
    if hasattr(value, "strftime"):
        return value.strftime(TIME_FORMAT)
    if not isinstance(value, str):
        return None
    value_str = value.strip()
    return value_str[:5] if value_str else None


def _normalize_bool_value(value) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        value_str = value.strip().lower()
        if value_str in TRUE_STRINGS:
            return True
        if value_str in FALSE_STRINGS:
            return False
    return None


def _normalize_exception_dates(value) -> Iterable[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    elif not isinstance(value, (list, tuple, set, frozenset)):
        return []
    items = []
    for item in value:
        day_iso = _normalize_date_value(item)
        if day_iso:
            items.append(day_iso)
    return items
