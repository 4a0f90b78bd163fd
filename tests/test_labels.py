from datetime import date

from agenda.events import Event
from agenda.labels import day_label, resolve_locale, time_range_label
from agenda.validation import is_valid_time, validate_time_range


def test_day_label_spanish():
    today = date(2024, 10, 4)
    assert day_label(date(2024, 10, 5), today) == "Mañana, 5 oct"
    assert day_label(date(2024, 10, 7), today) == "lunes 7 oct"
    assert day_label(date(2024, 9, 1), today) == "domingo 1 sept"


def test_day_label_english_and_fallback():
    today = date(2024, 10, 4)
    assert day_label(date(2024, 10, 5), today, "en") == "Tomorrow, Oct 5"
    assert day_label(date(2024, 10, 7), today, "en-US") == "Monday, Oct 7"
    assert resolve_locale("fr") == "es"
    assert resolve_locale(None) == "es"


def test_time_range_label():
    assert time_range_label(Event(id="a", origin_date="2024-01-01")) == "Todo el día"
    timed = Event(id="b", origin_date="2024-01-01", all_day=False, start_time="09:00", end_time="10:00")
    assert time_range_label(timed) == "09:00 – 10:00"
    open_ended = Event(id="c", origin_date="2024-01-01", all_day=False, start_time="09:00")
    assert time_range_label(open_ended) == "Sin hora"
    assert time_range_label(open_ended, "en") == "No time"


def test_is_valid_time():
    assert is_valid_time("09:30") is True
    assert is_valid_time("23:59") is True
    assert is_valid_time("24:00") is False
    assert is_valid_time("9:30") is False
    assert is_valid_time("09:60") is False
    assert is_valid_time(None) is False


def test_validate_time_range():
    assert validate_time_range(True, None, None) is None
    assert validate_time_range(False, "09:00", "10:00") is None
    assert validate_time_range(False, "10:00", "09:00") == "Start time must be before end time"
    assert validate_time_range(False, "10:00", "10:00") == "Start time must be before end time"
    assert validate_time_range(False, "9am", "10:00").startswith("Invalid time")
