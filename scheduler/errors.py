"""Exceptions raised by the calendar store and session."""

from __future__ import annotations


class CalendarError(Exception):
    """Base class for calendar failures reported to callers."""


class ValidationError(CalendarError, ValueError):
    """An add-item submission is missing a required field or has a bad date."""


class ItemNotFoundError(CalendarError, KeyError):
    """No item with the given id exists in the requested bucket."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "item not found"


class PersistenceError(CalendarError):
    """A mutation was rejected because the store changed underneath it.

    The attempted mutation is not applied; callers may reload and retry.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"calendar changed (expected version {expected}, found {actual})")
        self.expected = expected
        self.actual = actual


__all__ = ["CalendarError", "ValidationError", "ItemNotFoundError", "PersistenceError"]
