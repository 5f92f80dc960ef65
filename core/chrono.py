# core/chrono.py
from typing import Callable

from PySide6.QtCore import QObject, QTimer, Signal


class TickHandle(QObject):
    """A running periodic QTimer; ``cancel()`` stops it for good."""
    cancelled = Signal()

    def __init__(self, callback: Callable[[], object], interval_ms: int, parent=None):
        super().__init__(parent)
        self._callback = callback
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)
        self._cancelled = False

    @property
    def active(self) -> bool:
        return not self._cancelled and self._timer.isActive()

    def start(self):
        self._timer.start()

    def cancel(self):
        if self._cancelled:
            return
        self._cancelled = True
        self._timer.stop()
        self.cancelled.emit()
        # handles are single-use
        self.deleteLater()

    def _on_timeout(self):
        self._callback()


class QtTickScheduler:
    """Scheduler for ``Session``: ``scheduler(callback, interval_ms) -> TickHandle``."""

    def __init__(self, parent: QObject = None):
        self._parent = parent

    def __call__(self, callback: Callable[[], object], interval_ms: int) -> TickHandle:
        handle = TickHandle(callback, interval_ms, self._parent)
        handle.start()
        return handle
