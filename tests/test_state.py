from __future__ import annotations

import itertools
import unittest

from taqvim.core import AppState, events_on_day
from taqvim.domain import Blank, CalendarDate, Day, InvalidArgument

TODAY = CalendarDate(2024, 0, 15)


class AppStateTests(unittest.TestCase):
    def setUp(self) -> None:
        counter = itertools.count(1)
        self.state = AppState(
            year=2024,
            month=0,
            today=lambda: TODAY,
            id_factory=lambda: f"evt-{next(counter)}",
        )

    def test_starting_today_uses_today_provider(self) -> None:
        state = AppState.starting_today(today=lambda: CalendarDate(2023, 6, 4))
        self.assertEqual((state.year, state.month), (2023, 6))

    def test_navigation_rolls_over(self) -> None:
        self.state.navigate_prev()
        self.assertEqual((self.state.year, self.state.month), (2023, 11))
        self.state.navigate_next()
        self.state.navigate_next()
        self.assertEqual((self.state.year, self.state.month), (2024, 1))

    def test_navigation_across_december(self) -> None:
        state = AppState(year=2024, month=11, today=lambda: TODAY)
        state.navigate_next()
        self.assertEqual((state.year, state.month), (2025, 0))

    def test_navigate_today(self) -> None:
        self.state.navigate_next()
        self.state.navigate_next()
        self.state.navigate_today()
        self.assertEqual((self.state.year, self.state.month), (2024, 0))

    def test_add_event_assigns_id_and_closes_dialog(self) -> None:
        day = CalendarDate(2024, 0, 20)
        self.state.open_dialog(day)
        self.assertTrue(self.state.dialog_open)

        event = self.state.add_event(day, "  جلسه پروژه ", "بررسی پیشرفت")

        self.assertEqual(event.id, "evt-1")
        self.assertEqual(event.title, "جلسه پروژه")
        self.assertEqual(self.state.events, (event,))
        self.assertFalse(self.state.dialog_open)
        self.assertIsNone(self.state.selected_date)

    def test_add_event_requires_title(self) -> None:
        with self.assertRaises(InvalidArgument):
            self.state.add_event(CalendarDate(2024, 0, 20), "   ")
        self.assertEqual(self.state.events, ())

    def test_events_on_preserves_insertion_order(self) -> None:
        day = CalendarDate(2024, 0, 15)
        first = self.state.add_event(day, "first")
        self.state.add_event(CalendarDate(2024, 1, 15), "other")
        third = self.state.add_event(day, "third")
        self.assertEqual(self.state.events_on(day), [first, third])
        self.assertEqual(len(self.state.events), 3)

    def test_events_cannot_be_appended_around_add_event(self) -> None:
        day = CalendarDate(2024, 0, 15)
        event = self.state.add_event(day, "first")
        with self.assertRaises(AttributeError):
            self.state.events.append(event)  # type: ignore[attr-defined]
        self.assertEqual(self.state.events_on(day), events_on_day(self.state.events, day))
        self.assertEqual(len(self.state.events), 1)

    def test_month_view_follows_navigation(self) -> None:
        self.state.navigate_next()
        cells = self.state.month_view()
        days = [cell for cell in cells if isinstance(cell, Day)]
        self.assertEqual(len(days), 29)
        self.assertTrue(all(isinstance(cell, Blank) for cell in cells[: len(cells) - 29]))

    def test_is_today(self) -> None:
        self.assertTrue(self.state.is_today(CalendarDate(2024, 0, 15)))
        self.assertFalse(self.state.is_today(CalendarDate(2024, 0, 14)))

    def test_title_uses_persian_labels(self) -> None:
        self.assertEqual(self.state.title, ("فروردین", 1403))

    def test_close_dialog(self) -> None:
        self.state.open_dialog(CalendarDate(2024, 0, 3))
        self.state.close_dialog()
        self.assertFalse(self.state.dialog_open)

    def test_rejects_invalid_month(self) -> None:
        with self.assertRaises(InvalidArgument):
            AppState(year=2024, month=12)


if __name__ == "__main__":
    unittest.main()
