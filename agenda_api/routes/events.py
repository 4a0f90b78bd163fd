from __future__ import annotations

from fastapi import APIRouter

from agenda.events import Event, exclude_occurrence
from agenda.recurrence import occurs_on
from agenda_api.schemas import EventResponse, ExcludeRequest, OccursRequest, OccursResponse

router = APIRouter()


@router.post("/v1/events/occurs", response_model=OccursResponse)
async def event_occurs(payload: OccursRequest):
    event = Event.from_record(payload.event)
    return {"date": payload.date, "occurs": occurs_on(event, payload.date)}


@router.post("/v1/events/exclude", response_model=EventResponse)
async def event_exclude(payload: ExcludeRequest):
    event = exclude_occurrence(Event.from_record(payload.event), payload.date)
    return event.to_record()
