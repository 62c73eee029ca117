from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
)

from ...core import format_jalali
from ...domain import CalendarDate, InvalidArgument
from ...services import USER_ERROR_MESSAGE, EventSuggestion, SuggestionService
from ...utils.qt import TaskRunner

logger = logging.getLogger(__name__)

_SUGGEST_LABEL = "✨ پیشنهاد با هوش مصنوعی"
_LOADING_LABEL = "در حال پردازش..."


def _heading_date(day: CalendarDate) -> str:
    try:
        return format_jalali(day)
    except InvalidArgument:
        return day.isoformat()


class EventDialog(QDialog):
    def __init__(
        self,
        *,
        day: CalendarDate,
        suggestions: SuggestionService,
        runner: Optional[TaskRunner] = None,
    ) -> None:
        super().__init__()
        self.day = day
        self.suggestions = suggestions
        self.runner = runner or TaskRunner()

        self.setObjectName("eventDialog")
        self.setWindowTitle("افزودن رویداد")
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        self.setMinimumWidth(480)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        heading = QLabel(f"برای تاریخ: <b>{_heading_date(day)}</b>")
        layout.addWidget(heading)

        form = QFormLayout()
        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("مثال: جلسه پروژه")
        self.title_input.textChanged.connect(self._update_save_enabled)
        form.addRow("عنوان رویداد", self.title_input)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("جزئیات رویداد را وارد کنید...")
        form.addRow("توضیحات (اختیاری)", self.description_input)
        layout.addLayout(form)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorLabel")
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        buttons = QHBoxLayout()
        self.suggest_button = QPushButton(_SUGGEST_LABEL)
        self.suggest_button.setObjectName("secondaryButton")
        self.suggest_button.clicked.connect(self.request_suggestion)
        buttons.addWidget(self.suggest_button, stretch=1)

        self.save_button = QPushButton("ذخیره رویداد")
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self.accept)
        buttons.addWidget(self.save_button, stretch=1)
        layout.addLayout(buttons)

        self._update_save_enabled()

    def values(self) -> dict[str, str]:
        return {
            "title": self.title_input.text().strip(),
            "description": self.description_input.toPlainText().strip(),
        }

    def accept(self) -> None:
        if not self.title_input.text().strip():
            return
        super().accept()

    # ------------------------------------------------------------------ suggestion

    def request_suggestion(self) -> None:
        if self.runner.busy:
            # A request from this dialog is still running; keep showing it.
            self._set_loading(True)
            return
        self._set_loading(True)
        self.error_label.setVisible(False)
        day = self.day

        def worker() -> EventSuggestion:
            return self.suggestions.suggest(day)

        self.runner.submit(
            worker,
            on_success=self.apply_suggestion,
            on_error=self.show_suggestion_error,
            on_finished=lambda: self._set_loading(False),
        )

    def apply_suggestion(self, suggestion: EventSuggestion) -> None:
        self.title_input.setText(suggestion.title)
        self.description_input.setPlainText(suggestion.description)

    def show_suggestion_error(self, exc: Exception) -> None:
        logger.warning("Suggestion failed: %s", exc)
        self.error_label.setText(USER_ERROR_MESSAGE)
        self.error_label.setVisible(True)

    def _set_loading(self, loading: bool) -> None:
        self.suggest_button.setEnabled(not loading)
        self.suggest_button.setText(_LOADING_LABEL if loading else _SUGGEST_LABEL)

    def _update_save_enabled(self) -> None:
        self.save_button.setEnabled(bool(self.title_input.text().strip()))
