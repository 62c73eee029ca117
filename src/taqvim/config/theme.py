from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#111827"
    background_secondary: str = "#1f2937"
    surface: str = "#374151"
    surface_hover: str = "#4b5563"
    accent_primary: str = "#06b6d4"
    accent_hover: str = "#0891b2"
    accent_text: str = "#67e8f9"
    event_background: str = "#155e75"
    event_text: str = "#cffafe"
    accent_error: str = "#f87171"
    text_primary: str = "#ffffff"
    text_secondary: str = "#9ca3af"
    border_subtle: str = "#374151"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Vazirmatn', 'Tahoma', 'Segoe UI', sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: {self.text_primary};
            border: none;
            padding: 8px 16px;
            border-radius: 8px;
            font-weight: 700;
        }}
        QPushButton:hover {{
            background-color: {self.accent_hover};
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QPushButton#secondaryButton {{
            background-color: {self.surface_hover};
            font-weight: 600;
        }}
        QPushButton#navButton {{
            background-color: transparent;
            border-radius: 16px;
            padding: 6px 10px;
        }}
        QPushButton#navButton:hover {{
            background-color: {self.surface};
        }}
        QLineEdit, QTextEdit {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            border: 1px solid {self.surface_hover};
            border-radius: 8px;
            padding: 10px 12px;
        }}
        QLineEdit:focus, QTextEdit:focus {{
            border-color: {self.accent_primary};
        }}
        QLabel#title {{
            font-size: 24px;
            font-weight: 800;
            color: {self.accent_text};
        }}
        QLabel#monthName {{
            font-size: 20px;
            font-weight: 600;
            color: {self.accent_text};
        }}
        QLabel#yearLabel {{
            font-size: 20px;
            color: {self.text_secondary};
        }}
        QLabel#weekdayHeader {{
            font-weight: 600;
            color: {self.accent_primary};
            padding: 6px;
        }}
        QLabel#errorLabel {{
            color: {self.accent_error};
        }}
        QLabel#eventChip {{
            background-color: {self.event_background};
            color: {self.event_text};
            border-radius: 6px;
            padding: 2px 4px;
            font-size: 11px;
        }}
        QFrame#navBar, QWidget#calendarGrid {{
            background-color: {self.background_secondary};
            border-radius: 8px;
        }}
        QFrame#dayCell {{
            background-color: rgba(55, 65, 81, 0.5);
            border-radius: 6px;
        }}
        QFrame#dayCell:hover {{
            background-color: rgba(75, 85, 99, 0.7);
        }}
        QFrame#blankCell {{
            background-color: transparent;
        }}
        QLabel#dayNumber {{
            color: #d1d5db;
            background-color: transparent;
        }}
        QLabel#todayNumber {{
            background-color: {self.accent_primary};
            color: {self.text_primary};
            border-radius: 14px;
            min-width: 28px;
            min-height: 28px;
            qproperty-alignment: AlignCenter;
        }}
        QDialog#eventDialog {{
            background-color: {self.background_secondary};
        }}
        """
