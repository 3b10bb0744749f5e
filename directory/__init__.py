"""Static people directory used by the calendar forms."""

from .roster import DEPARTMENTS, Roster, roster

__all__ = ["DEPARTMENTS", "Roster", "roster"]
