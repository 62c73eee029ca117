from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from ..domain import CalendarDate, CalendarEvent


def events_on_day(events: Sequence[CalendarEvent], day: CalendarDate) -> List[CalendarEvent]:
    """Events whose date is the same calendar day as ``day``, in input order."""
    return [event for event in events if event.date == day]


@dataclass
class DayIndex:
    """In-memory index of session events keyed by calendar day."""

    days_index: Dict[CalendarDate, List[CalendarEvent]] = field(default_factory=dict)

    @classmethod
    def from_events(cls, events: Iterable[CalendarEvent]) -> "DayIndex":
        index = cls()
        for event in events:
            index.add(event)
        return index

    def add(self, event: CalendarEvent) -> None:
        self.days_index.setdefault(event.date, []).append(event)

    def events_for(self, day: CalendarDate) -> List[CalendarEvent]:
        return list(self.days_index.get(day, []))

    def days(self) -> List[CalendarDate]:
        return sorted(self.days_index, key=lambda item: (item.year, item.month, item.day))

    def clear(self) -> None:
        self.days_index.clear()

    def __len__(self) -> int:
        return sum(len(items) for items in self.days_index.values())
