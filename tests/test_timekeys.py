from __future__ import annotations

from datetime import date, datetime

import pytest

from scheduler.errors import ValidationError
from scheduler.timekeys import day_key, minute_of_day, normalise_day_key, parse_day, sort_by_time


def test_day_key_is_iso() -> None:
    assert day_key(date(2025, 3, 9)) == "2025-03-09"
    assert day_key(datetime(2025, 3, 9, 23, 59)) == "2025-03-09"


def test_parse_day_accepts_timestamps() -> None:
    assert parse_day("2025-01-01") == date(2025, 1, 1)
    assert normalise_day_key("2025-01-01T10:30:00Z") == "2025-01-01"


@pytest.mark.parametrize(
    "value", ["", "   ", "next tuesday", "2025-13-01", "2025-01-06 is not a date", "2025-01-06xyz"]
)
def test_parse_day_rejects_bad_input(value: str) -> None:
    with pytest.raises(ValidationError):
        parse_day(value)


def test_minute_of_day_handles_noon_and_midnight() -> None:
    assert minute_of_day("12:00 AM") == 0
    assert minute_of_day("01:30 AM") == 90
    assert minute_of_day("12:00 PM") == 720
    assert minute_of_day("01:00 PM") == 780
    assert minute_of_day("9:05 pm") == 21 * 60 + 5
    assert minute_of_day("13:00 PM") is None
    assert minute_of_day("soon") is None


def test_sort_by_time_is_numeric_and_stable() -> None:
    values = ["01:00 PM", "12:00 PM", "whenever", "08:30 AM", "08:30 AM", "12:00 AM"]
    tagged = list(enumerate(values))
    ordered = sort_by_time(tagged, key=lambda pair: pair[1])
    assert ordered == [
        (5, "12:00 AM"),
        (3, "08:30 AM"),
        (4, "08:30 AM"),
        (1, "12:00 PM"),
        (0, "01:00 PM"),
        (2, "whenever"),
    ]


def test_parse_day_accepts_datetime_with_space() -> None:
    assert parse_day("2025-01-06 14:30") == date(2025, 1, 6)
