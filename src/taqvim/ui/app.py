from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    apply_palette(app, AppPalette())

    if not settings.llm.is_configured:
        missing = ", ".join(settings.llm.missing_env_vars)
        logging.getLogger(__name__).warning("AI suggestions disabled until configured. Missing: %s", missing)

    window = MainWindow(settings=settings)
    window.show()
    sys.exit(app.exec())
