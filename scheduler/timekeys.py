"""Day-key and clock-time helpers.

Buckets are keyed by ISO ``YYYY-MM-DD`` strings everywhere: generation,
lookups and the "today" comparison all go through :func:`day_key`.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Iterable, List, Optional, TypeVar, Union

from scheduler.errors import ValidationError

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")

T = TypeVar("T")


def day_key(value: Union[date, datetime]) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_day(value: str) -> date:
    """Parse a submitted calendar date into a ``date``.

    Accepts ``YYYY-MM-DD`` as well as full ISO timestamps.
    """

    text = (value or "").strip()
    if not text:
        raise ValidationError("date is required")
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise ValidationError(f"invalid date: {value!r}") from exc


def normalise_day_key(value: str) -> str:
    return day_key(parse_day(value))


def format_time(hour: int, minute: int, meridiem: str) -> str:
    return f"{hour:02d}:{minute:02d} {meridiem.upper()}"


def minute_of_day(value: str) -> Optional[int]:
    """Return minutes since midnight for ``"HH:MM AM/PM"``, or ``None``."""

    match = _TIME_RE.match(value or "")
    if not match:
        return None
    hour, minute, meridiem = int(match.group(1)), int(match.group(2)), match.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        return None
    hour = hour % 12
    if meridiem == "PM":
        hour += 12
    return hour * 60 + minute


def sort_by_time(items: Iterable[T], key=lambda item: item.scheduled_time) -> List[T]:
    """Stable ascending sort by clock time; unparseable times go last."""

    def _rank(item: T):
        minutes = minute_of_day(key(item))
        return (1, 0) if minutes is None else (0, minutes)

    return sorted(items, key=_rank)


__all__ = [
    "day_key",
    "parse_day",
    "normalise_day_key",
    "format_time",
    "minute_of_day",
    "sort_by_time",
]
