from __future__ import annotations

import unittest

from taqvim.core import DayIndex, events_on_day
from taqvim.domain import CalendarDate, CalendarEvent


def _event(identifier: str, year: int, month: int, day: int) -> CalendarEvent:
    return CalendarEvent(id=identifier, date=CalendarDate(year, month, day), title=f"event {identifier}")


class EventsOnDayTests(unittest.TestCase):
    def setUp(self) -> None:
        self.events = [
            _event("a", 2024, 0, 15),
            _event("b", 2024, 0, 15),
            _event("c", 2024, 1, 15),
        ]

    def test_returns_matching_events_in_order(self) -> None:
        result = events_on_day(self.events, CalendarDate(2024, 0, 15))
        self.assertEqual([event.id for event in result], ["a", "b"])

    def test_empty_when_nothing_matches(self) -> None:
        self.assertEqual(events_on_day(self.events, CalendarDate(2024, 2, 15)), [])

    def test_excludes_same_month_different_day(self) -> None:
        self.assertEqual(events_on_day(self.events, CalendarDate(2024, 0, 16)), [])

    def test_excludes_other_year(self) -> None:
        self.assertEqual(events_on_day(self.events, CalendarDate(2023, 0, 15)), [])

    def test_does_not_mutate_input(self) -> None:
        snapshot = list(self.events)
        events_on_day(self.events, CalendarDate(2024, 0, 15))
        self.assertEqual(self.events, snapshot)


class DayIndexTests(unittest.TestCase):
    def test_matches_linear_scan(self) -> None:
        events = [
            _event("a", 2024, 0, 15),
            _event("b", 2024, 1, 15),
            _event("c", 2024, 0, 15),
        ]
        index = DayIndex.from_events(events)
        for day in (CalendarDate(2024, 0, 15), CalendarDate(2024, 1, 15), CalendarDate(2024, 0, 1)):
            with self.subTest(day=day):
                self.assertEqual(index.events_for(day), events_on_day(events, day))
        self.assertEqual(len(index), 3)
        self.assertEqual(index.days(), [CalendarDate(2024, 0, 15), CalendarDate(2024, 1, 15)])

    def test_returned_list_is_a_copy(self) -> None:
        index = DayIndex.from_events([_event("a", 2024, 0, 15)])
        index.events_for(CalendarDate(2024, 0, 15)).clear()
        self.assertEqual(len(index.events_for(CalendarDate(2024, 0, 15))), 1)


if __name__ == "__main__":
    unittest.main()
