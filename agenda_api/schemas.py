from __future__ import annotations

from datetime import date as dt_date
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field


class OccursRequest(BaseModel):
    event: Dict[str, Any]
    date: str


class OccursResponse(BaseModel):
    date: str
    occurs: bool


class ExcludeRequest(BaseModel):
    event: Dict[str, Any]
    date: dt_date


class EventResponse(BaseModel):
    id: str
    origin_date: Optional[str]
    recurrence: str
    exception_dates: List[str]
    all_day: bool
    start_time: Optional[str]
    end_time: Optional[str]
    title: str
    description: str
    video_url: Optional[str] = None


class MarksRequest(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)
    start: dt_date
    days: Optional[int] = None


class MarksResponse(BaseModel):
    start: str
    days: int
    marks: Dict[str, bool]


class DayRequest(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)
    date: dt_date
    locale: Optional[str] = None


class DayEventResponse(EventResponse):
    time_label: str


class DayResponse(BaseModel):
    date: str
    events: List[DayEventResponse]


class UpcomingRequest(BaseModel):
    events: List[Dict[str, Any]] = Field(default_factory=list)
    today: Optional[dt_date] = None
    lookahead_days: Optional[int] = None
    locale: Optional[str] = None


class UpcomingGroupResponse(BaseModel):
    date: str
    label: str
    events: List[EventResponse]


class UpcomingResponse(BaseModel):
    today: str
    lookahead_days: int
    groups: List[UpcomingGroupResponse]
