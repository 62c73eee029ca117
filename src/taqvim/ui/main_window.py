from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget

from ..config.settings import AppSettings
from ..core import AppState
from ..domain import CalendarDate, InvalidArgument
from ..services import SuggestionService
from .components.calendar_grid import CalendarGrid
from .components.event_dialog import EventDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        *,
        settings: AppSettings,
        state: Optional[AppState] = None,
        suggestions: Optional[SuggestionService] = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.state = state or AppState.starting_today(week_start_offset=settings.ui.week_start_offset)
        self.suggestions = suggestions or SuggestionService(settings.llm)

        self.setWindowTitle(settings.ui.app_name)
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        self.resize(1100, 820)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        layout.addLayout(self._build_header())
        layout.addWidget(self._build_nav_bar())

        self.grid = CalendarGrid(week_start_offset=self.state.week_start_offset)
        self.grid.date_clicked.connect(self.open_dialog_for)
        layout.addWidget(self.grid, stretch=1)

        self.setCentralWidget(root)
        self.refresh()

    # ------------------------------------------------------------------ layout

    def _build_header(self) -> QHBoxLayout:
        header = QHBoxLayout()
        title = QLabel(self.settings.ui.app_name)
        title.setObjectName("title")
        header.addWidget(title)
        header.addStretch(1)

        new_event = QPushButton("+ رویداد جدید")
        new_event.clicked.connect(lambda: self.open_dialog_for(self.state.today()))
        header.addWidget(new_event)
        return header

    def _build_nav_bar(self) -> QFrame:
        bar = QFrame()
        bar.setObjectName("navBar")
        row = QHBoxLayout(bar)
        row.setContentsMargins(12, 8, 12, 8)

        prev_button = QPushButton("›")
        prev_button.setObjectName("navButton")
        prev_button.clicked.connect(self.show_prev_month)
        row.addWidget(prev_button)
        row.addStretch(1)

        self.month_label = QLabel("")
        self.month_label.setObjectName("monthName")
        row.addWidget(self.month_label)
        self.year_label = QLabel("")
        self.year_label.setObjectName("yearLabel")
        row.addWidget(self.year_label)
        row.addStretch(1)

        today_button = QPushButton("امروز")
        today_button.setObjectName("secondaryButton")
        today_button.clicked.connect(self.show_today)
        row.addWidget(today_button)

        next_button = QPushButton("‹")
        next_button.setObjectName("navButton")
        next_button.clicked.connect(self.show_next_month)
        row.addWidget(next_button)
        return bar

    # ------------------------------------------------------------------ rendering

    def refresh(self) -> None:
        month_name, year_label = self.state.title
        self.month_label.setText(month_name)
        self.year_label.setText(str(year_label))
        self.grid.show_month(
            self.state.month_view(),
            events_for=self.state.events_on,
            is_today=self.state.is_today,
        )

    # ------------------------------------------------------------------ navigation

    def show_prev_month(self) -> None:
        self.state.navigate_prev()
        self.refresh()

    def show_next_month(self) -> None:
        self.state.navigate_next()
        self.refresh()

    def show_today(self) -> None:
        self.state.navigate_today()
        self.refresh()

    # ------------------------------------------------------------------ events

    def open_dialog_for(self, day: CalendarDate) -> None:
        self.state.open_dialog(day)
        dialog = EventDialog(day=day, suggestions=self.suggestions)
        if dialog.exec() != EventDialog.DialogCode.Accepted:
            self.state.close_dialog()
            return
        values = dialog.values()
        try:
            self.state.add_event(day, values["title"], values["description"])
        except InvalidArgument as exc:
            self.state.close_dialog()
            QMessageBox.warning(self, "خطا", str(exc))
            return
        self.statusBar().showMessage("رویداد ذخیره شد.", 3000)
        self.refresh()
