from __future__ import annotations

from typing import Callable, List, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

from ...core import SATURDAY_FIRST, month_rows, weekday_headers
from ...domain import CalendarDate, CalendarEvent, Cell, Day


class DayCell(QFrame):
    clicked = pyqtSignal(object)

    def __init__(self, day: CalendarDate, events: Sequence[CalendarEvent], *, today: bool) -> None:
        super().__init__()
        self.day = day
        self.setObjectName("dayCell")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(96)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(3)

        number = QLabel(str(day.day))
        number.setObjectName("todayNumber" if today else "dayNumber")
        layout.addWidget(number, alignment=Qt.AlignmentFlag.AlignLeading)

        for event in events:
            chip = QLabel(event.title)
            chip.setObjectName("eventChip")
            chip.setToolTip(event.description or event.title)
            layout.addWidget(chip)
        layout.addStretch(1)

    def mouseReleaseEvent(self, event) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.day)
        super().mouseReleaseEvent(event)


class CalendarGrid(QWidget):
    """Seven-column month grid with a Persian weekday header."""

    date_clicked = pyqtSignal(object)

    def __init__(self, *, week_start_offset: int = SATURDAY_FIRST) -> None:
        super().__init__()
        self.setObjectName("calendarGrid")
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        self.grid = QGridLayout(self)
        self.grid.setContentsMargins(8, 8, 8, 8)
        self.grid.setSpacing(4)
        self._cells: List[QWidget] = []

        for column, name in enumerate(weekday_headers(week_start_offset)):
            header = QLabel(name)
            header.setObjectName("weekdayHeader")
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.grid.addWidget(header, 0, column)
            self.grid.setColumnStretch(column, 1)

    def show_month(
        self,
        cells: Sequence[Cell],
        *,
        events_for: Callable[[CalendarDate], List[CalendarEvent]],
        is_today: Callable[[CalendarDate], bool],
    ) -> None:
        self._clear()
        for row_index, row in enumerate(month_rows(cells), start=1):
            for column, cell in enumerate(row):
                widget = self._build_cell(cell, events_for=events_for, is_today=is_today)
                self.grid.addWidget(widget, row_index, column)
                self._cells.append(widget)

    def _build_cell(
        self,
        cell: Cell,
        *,
        events_for: Callable[[CalendarDate], List[CalendarEvent]],
        is_today: Callable[[CalendarDate], bool],
    ) -> QWidget:
        if isinstance(cell, Day):
            widget = DayCell(cell.date, events_for(cell.date), today=is_today(cell.date))
            widget.clicked.connect(self.date_clicked)
            return widget
        blank = QFrame()
        blank.setObjectName("blankCell")
        return blank

    def _clear(self) -> None:
        for widget in self._cells:
            self.grid.removeWidget(widget)
            widget.deleteLater()
        self._cells.clear()
