from __future__ import annotations

import re

_TIME_RE = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


def is_valid_time(value) -> bool:
    return isinstance(value, str) and bool(_TIME_RE.fullmatch(value))


def validate_time_range(all_day: bool, start_time: str | None, end_time: str | None) -> str | None:
    """Return an error message for an invalid event time range, else None."""
    if all_day:
        return None
    if not is_valid_time(start_time) or not is_valid_time(end_time):
        return "Invalid time, expected HH:MM (e.g. 09:30)"
    # Zero-padded HH:MM strings order the same as the times they encode.
    if start_time >= end_time:
        return "Start time must be before end time"
    return None
