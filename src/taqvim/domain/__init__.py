"""Domain models for the month calendar."""

from __future__ import annotations

from .errors import InvalidArgument, SuggestionError, TaqvimError
from .models import Blank, CalendarDate, CalendarEvent, Cell, Day

__all__ = [
    "Blank",
    "CalendarDate",
    "CalendarEvent",
    "Cell",
    "Day",
    "InvalidArgument",
    "SuggestionError",
    "TaqvimError",
]
