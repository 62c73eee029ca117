from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
from uuid import uuid4

from ..domain import CalendarDate, CalendarEvent, Cell, InvalidArgument
from .events import DayIndex
from .labels import month_title
from .month_view import SATURDAY_FIRST, build_month_view, is_today, next_month, prev_month

logger = logging.getLogger(__name__)


def _new_event_id() -> str:
    return uuid4().hex


@dataclass
class AppState:
    """Session state for the calendar window.

    The event list and the visible month change only through the transition
    methods below; the rendering layer reads the rest.
    """

    year: int
    month: int
    week_start_offset: int = SATURDAY_FIRST
    today: Callable[[], CalendarDate] = CalendarDate.today
    id_factory: Callable[[], str] = _new_event_id
    _events: List[CalendarEvent] = field(default_factory=list, init=False, repr=False)
    selected_date: Optional[CalendarDate] = None
    _index: DayIndex = field(default_factory=DayIndex, init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise InvalidArgument(f"month must be in [0, 11], got {self.month!r}")

    @classmethod
    def starting_today(
        cls,
        *,
        week_start_offset: int = SATURDAY_FIRST,
        today: Callable[[], CalendarDate] = CalendarDate.today,
    ) -> "AppState":
        current = today()
        return cls(year=current.year, month=current.month, week_start_offset=week_start_offset, today=today)

    # ------------------------------------------------------------------ queries

    @property
    def events(self) -> Tuple[CalendarEvent, ...]:
        """Session events in insertion order. Add new ones with :meth:`add_event`."""
        return tuple(self._events)

    @property
    def dialog_open(self) -> bool:
        return self.selected_date is not None

    @property
    def title(self) -> Tuple[str, int]:
        return month_title(self.year, self.month)

    def month_view(self) -> List[Cell]:
        return build_month_view(self.year, self.month, self.week_start_offset)

    def events_on(self, day: CalendarDate) -> List[CalendarEvent]:
        return self._index.events_for(day)

    def is_today(self, day: CalendarDate) -> bool:
        return is_today(day, self.today)

    # ------------------------------------------------------------------ transitions

    def navigate_prev(self) -> None:
        self.year, self.month = prev_month(self.year, self.month)

    def navigate_next(self) -> None:
        self.year, self.month = next_month(self.year, self.month)

    def navigate_today(self) -> None:
        current = self.today()
        self.year, self.month = current.year, current.month

    def open_dialog(self, day: CalendarDate) -> None:
        self.selected_date = day

    def close_dialog(self) -> None:
        self.selected_date = None

    def add_event(self, day: CalendarDate, title: str, description: str = "") -> CalendarEvent:
        title = title.strip()
        if not title:
            raise InvalidArgument("event title is required")
        event = CalendarEvent(id=self.id_factory(), date=day, title=title, description=description.strip())
        self._events.append(event)
        self._index.add(event)
        logger.info("Added event %s on %s", event.id, day.isoformat())
        self.close_dialog()
        return event
