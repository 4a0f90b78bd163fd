from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from agenda.events import Event
from agenda.labels import resolve_locale, time_range_label
from agenda.projection import calendar_marks, events_on
from agenda.upcoming import upcoming
from agenda_api.schemas import (
    DayRequest,
    DayResponse,
    MarksRequest,
    MarksResponse,
    UpcomingRequest,
    UpcomingResponse,
)
from agenda_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_events(rows) -> list[Event]:
    return [Event.from_record(row) for row in rows]


def _check_window(days: int, settings: Settings, name: str) -> int:
    if days < 1 or days > settings.max_window_days:
        raise HTTPException(
            status_code=400,
            detail=f"{name} must be between 1 and {settings.max_window_days}",
        )
    return days


@router.post("/v1/calendar/marks", response_model=MarksResponse)
def calendar_marks_route(payload: MarksRequest, settings: Settings = Depends(get_settings)):
    days = payload.days if payload.days is not None else settings.calendar_window_days
    _check_window(days, settings, "days")
    events = _load_events(payload.events)
    marks = calendar_marks(events, payload.start, days)
    return {"start": payload.start.isoformat(), "days": days, "marks": marks}


@router.post("/v1/calendar/day", response_model=DayResponse)
def calendar_day(payload: DayRequest, settings: Settings = Depends(get_settings)):
    locale = resolve_locale(payload.locale or settings.label_locale)
    items = []
    for event in events_on(_load_events(payload.events), payload.date):
        items.append({**event.to_record(), "time_label": time_range_label(event, locale)})
    return {"date": payload.date.isoformat(), "events": items}


@router.post("/v1/calendar/upcoming", response_model=UpcomingResponse)
def calendar_upcoming(payload: UpcomingRequest, settings: Settings = Depends(get_settings)):
    today = payload.today or settings.today()
    lookahead_days = payload.lookahead_days if payload.lookahead_days is not None else settings.lookahead_days
    _check_window(lookahead_days, settings, "lookahead_days")
    locale = payload.locale or settings.label_locale
    groups = upcoming(_load_events(payload.events), today, lookahead_days, locale)
    logger.debug("Built %s upcoming groups from %s events", len(groups), len(payload.events))
    return {
        "today": today.isoformat(),
        "lookahead_days": lookahead_days,
        "groups": [
            {
                "date": group.date.isoformat(),
                "label": group.label,
                "events": [event.to_record() for event in group.events],
            }
            for group in groups
        ],
    }
