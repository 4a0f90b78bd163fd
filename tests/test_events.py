from datetime import date, time

from agenda.events import Event, exclude_occurrence, normalize_recurrence


def test_from_record_accepts_stored_column_names():
    event = Event.from_record(
        {
            "id": 7,
            "fecha": "2024-01-01",
            "titulo": "Gym",
            "descripcion": "Leg day",
            "es_todo_el_dia": False,
            "hora_inicio": "07:30:00",
            "hora_fin": time(8, 30),
            "recurrence": None,
            "exception_dates": None,
        }
    )
    assert event.id == "7"
    assert event.origin_date == "2024-01-01"
    assert event.title == "Gym"
    assert event.recurrence == "none"
    assert event.is_recurring is False
    assert event.all_day is False
    assert event.start_time == "07:30"
    assert event.end_time == "08:30"
    assert event.exception_dates == frozenset()


def test_from_record_normalizes_dates_and_recurrence():
    event = Event.from_record(
        {
            "id": "abc",
            "origin_date": date(2024, 1, 1),
            "recurrence": " Weekly ",
            "exception_dates": [date(2024, 1, 8), "2024-01-15", ""],
        }
    )
    assert event.origin_date == "2024-01-01"
    assert event.recurrence == "weekly"
    assert event.exception_dates == frozenset({"2024-01-08", "2024-01-15"})
    assert event.all_day is True


def test_from_record_keeps_corrupt_origin_verbatim():
    event = Event.from_record({"id": "x", "fecha": "31/12/2024"})
    assert event.origin_date == "31/12/2024"


def test_all_day_events_drop_times():
    event = Event.from_record({"id": "x", "fecha": "2024-01-01", "all_day": True, "start_time": "09:00"})
    assert event.start_time is None
    assert event.sort_time == ""


def test_exclude_occurrence_returns_copy():
    event = Event(id="d", origin_date="2024-01-01", recurrence="daily")
    updated = exclude_occurrence(event, date(2024, 1, 3))
    assert updated.exception_dates == frozenset({"2024-01-03"})
    assert event.exception_dates == frozenset()
    assert exclude_occurrence(updated, "2024-01-03") is updated
    assert exclude_occurrence(event, "") is event


def test_to_record_sorts_exception_dates():
    event = Event(id="d", origin_date="2024-01-01", exception_dates=frozenset({"2024-02-01", "2024-01-05"}))
    assert event.to_record()["exception_dates"] == ["2024-01-05", "2024-02-01"]


def test_normalize_recurrence_defaults_to_none():
    assert normalize_recurrence(None) == "none"
    assert normalize_recurrence("  ") == "none"
    assert normalize_recurrence("MONTHLY") == "monthly"


def test_from_record_ignores_non_list_exception_dates():
    for raw in (5, True, 3.5, {"2024-01-02": True}):
        event = Event.from_record({"id": "x", "fecha": "2024-01-02", "exception_dates": raw})
        assert event.exception_dates == frozenset()
    event = Event.from_record({"id": "x", "fecha": "2024-01-02", "exception_dates": "2024-01-09, 2024-01-16"})
    assert event.exception_dates == frozenset({"2024-01-09", "2024-01-16"})


def test_from_record_parses_string_booleans():
    event = Event.from_record({"id": "x", "fecha": "2024-01-01", "es_todo_el_dia": "false", "hora_inicio": "09:00"})
    assert event.all_day is False
    assert event.start_time == "09:00"
    for raw in ("0", "no", ""):
        assert Event.from_record({"id": "x", "fecha": "2024-01-01", "all_day": raw}).all_day is False
    for raw in ("true", "1", "Yes", 1):
        assert Event.from_record({"id": "x", "fecha": "2024-01-01", "all_day": raw}).all_day is True


def test_from_record_unrecognized_all_day_falls_back_to_times():
    event = Event.from_record({"id": "x", "fecha": "2024-01-01", "all_day": "maybe", "start_time": "08:00"})
    assert event.all_day is False
    assert event.start_time == "08:00"


def test_from_record_drops_non_string_times():
    event = Event.from_record(
        {"id": "x", "fecha": "2024-01-01", "all_day": False, "start_time": 930, "end_time": ["10:00"], "video_url": 5}
    )
    assert event.start_time is None
    assert event.end_time is None
    assert event.sort_time == ""
    assert event.video_url == "5"
