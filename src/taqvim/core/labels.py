"""Persian display labels for the month grid and the event dialog."""

from __future__ import annotations

from typing import Tuple

import jdatetime

from ..domain import CalendarDate, InvalidArgument

FARSI_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

# Saturday first, matching the SATURDAY_FIRST grid rotation.
FARSI_WEEKDAYS = ("شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه")

# Offset between Gregorian and Solar Hijri year numbers used for the header label.
PERSIAN_YEAR_OFFSET = 621


def month_title(year: int, month: int) -> Tuple[str, int]:
    """Return the header label for a Gregorian (year, month) view.

    The month index is mapped straight onto the Persian month names and the
    year is shifted by a constant. This is a cosmetic label, not a calendar
    conversion; use :func:`format_jalali` for an exact date.
    """

    if not 0 <= month <= 11:
        raise InvalidArgument(f"month must be in [0, 11], got {month!r}")
    return FARSI_MONTHS[month], year - PERSIAN_YEAR_OFFSET


def format_jalali(value: CalendarDate, *, with_weekday: bool = False) -> str:
    """Format a day in the Solar Hijri calendar, e.g. ``25 دی 1402``."""

    try:
        jalali = jdatetime.date.fromgregorian(date=value.to_date())
    except ValueError as exc:
        raise InvalidArgument(f"cannot convert {value.isoformat()} to the Solar Hijri calendar: {exc}") from exc
    text = f"{jalali.day} {FARSI_MONTHS[jalali.month - 1]} {jalali.year}"
    if with_weekday:
        # jdatetime weekdays start at Saturday = 0.
        text = f"{FARSI_WEEKDAYS[jalali.weekday()]} {text}"
    return text


def weekday_headers(week_start_offset: int) -> Tuple[str, ...]:
    """Column headers for a grid rotated by ``week_start_offset``."""

    if not 0 <= week_start_offset <= 6:
        raise InvalidArgument(f"week_start_offset must be in [0, 6], got {week_start_offset!r}")
    # Column c shows native weekday (c - offset) % 7; FARSI_WEEKDAYS starts one step later.
    return tuple(FARSI_WEEKDAYS[(column - week_start_offset + 1) % 7] for column in range(7))
