"""Pure month-grid calculations. No UI dependencies."""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Callable, List, Optional, Sequence, Tuple

from ..domain import Blank, CalendarDate, Cell, Day, InvalidArgument

# Offset 1 rotates Saturday (native index 6) into column 0.
SATURDAY_FIRST = 1


def _check_month(month: int) -> None:
    if not isinstance(month, int) or not 0 <= month <= 11:
        raise InvalidArgument(f"month must be in [0, 11], got {month!r}")


def _check_year(year: int) -> None:
    if not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgument(f"year must be in [{MINYEAR}, {MAXYEAR}], got {year!r}")


def _check_offset(week_start_offset: int) -> None:
    if not isinstance(week_start_offset, int) or not 0 <= week_start_offset <= 6:
        raise InvalidArgument(f"week_start_offset must be in [0, 6], got {week_start_offset!r}")


def next_month(year: int, month: int) -> Tuple[int, int]:
    """Return (year, month) for one month later."""
    _check_month(month)
    if month == 11:
        return year + 1, 0
    return year, month + 1


def prev_month(year: int, month: int) -> Tuple[int, int]:
    """Return (year, month) for one month earlier."""
    _check_month(month)
    if month == 0:
        return year - 1, 11
    return year, month - 1


def native_weekday(value: date) -> int:
    """Weekday index with Sunday = 0 through Saturday = 6."""
    return (value.weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    """Day-of-month of the day before the first of the following month."""
    _check_year(year)
    _check_month(month)
    following_year, following_month = next_month(year, month)
    if following_year > MAXYEAR:
        # December of the last supported year; there is no following month to step back from.
        return 31
    first_of_following = date(following_year, following_month + 1, 1)
    return (first_of_following - timedelta(days=1)).day


def start_offset(year: int, month: int, week_start_offset: int = SATURDAY_FIRST) -> int:
    """Grid column (0-6) of the first day of the month."""
    _check_year(year)
    _check_month(month)
    _check_offset(week_start_offset)
    first_of_month = date(year, month + 1, 1)
    return (native_weekday(first_of_month) + week_start_offset) % 7


def build_month_view(year: int, month: int, week_start_offset: int = SATURDAY_FIRST) -> List[Cell]:
    """Return the ordered cells of a month view.

    Leading ``Blank`` cells align the first day under its weekday column.
    The grid is not padded at the end.
    """

    blanks = start_offset(year, month, week_start_offset)
    total_days = days_in_month(year, month)

    cells: List[Cell] = [Blank() for _ in range(blanks)]
    for index in range(1, total_days + 1):
        cells.append(Day(CalendarDate(year, month, index)))
    return cells


def month_rows(cells: Sequence[Cell], width: int = 7) -> List[List[Cell]]:
    """Chunk a month view into grid rows. The last row may be short."""
    return [list(cells[start:start + width]) for start in range(0, len(cells), width)]


def is_today(day: CalendarDate, today: Optional[Callable[[], CalendarDate]] = None) -> bool:
    current = (today or CalendarDate.today)()
    return day == current


__all__ = [
    "SATURDAY_FIRST",
    "build_month_view",
    "days_in_month",
    "is_today",
    "month_rows",
    "native_weekday",
    "next_month",
    "prev_month",
    "start_offset",
]
