"""Calendar math, event association and session state."""

from __future__ import annotations

from .events import DayIndex, events_on_day
from .labels import FARSI_MONTHS, FARSI_WEEKDAYS, format_jalali, month_title, weekday_headers
from .month_view import (
    SATURDAY_FIRST,
    build_month_view,
    days_in_month,
    is_today,
    month_rows,
    next_month,
    prev_month,
    start_offset,
)
from .state import AppState

__all__ = [
    "AppState",
    "DayIndex",
    "FARSI_MONTHS",
    "FARSI_WEEKDAYS",
    "SATURDAY_FIRST",
    "build_month_view",
    "days_in_month",
    "events_on_day",
    "format_jalali",
    "is_today",
    "month_rows",
    "month_title",
    "next_month",
    "prev_month",
    "start_offset",
    "weekday_headers",
]
