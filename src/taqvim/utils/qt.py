from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

logger = logging.getLogger(__name__)


class TaskSignals(QObject):
    completed = pyqtSignal(object)
    failed = pyqtSignal(Exception)
    finished = pyqtSignal()


class _Runnable(QRunnable):
    def __init__(self, fn: Callable[[], Any], signals: TaskSignals) -> None:
        super().__init__()
        self.fn = fn
        self.signals = signals

    def run(self) -> None:  # noqa: D401
        try:
            result = self.fn()
        except Exception as exc:  # noqa: BLE001
            self.signals.failed.emit(exc)
        else:
            self.signals.completed.emit(result)
        finally:
            self.signals.finished.emit()


@dataclass
class TaskHandle:
    signals: TaskSignals


class TaskRunner:
    """Runs one background call at a time on the global thread pool.

    ``busy`` is the loading flag: it is set on submit and cleared once the
    completion or failure callback has run on the GUI thread.
    """

    def __init__(self, *, pool: Optional[QThreadPool] = None) -> None:
        self.pool = pool or QThreadPool.globalInstance()
        self._busy = False
        self._handle: Optional[TaskHandle] = None

    @property
    def busy(self) -> bool:
        return self._busy

    def submit(
        self,
        fn: Callable[[], Any],
        *,
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> Optional[TaskHandle]:
        if self._busy:
            logger.debug("Ignoring submit while a task is running")
            return None

        signals = TaskSignals()
        if on_success:
            signals.completed.connect(on_success)
        if on_error:
            signals.failed.connect(on_error)
        signals.finished.connect(self._clear_busy)
        if on_finished:
            signals.finished.connect(on_finished)

        self._busy = True
        # Keep a reference so the signals object outlives the runnable.
        self._handle = TaskHandle(signals=signals)
        self.pool.start(_Runnable(fn, signals))
        return self._handle

    def _clear_busy(self) -> None:
        self._busy = False
        self._handle = None
