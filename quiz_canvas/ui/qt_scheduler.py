"""Scheduler backed by Qt single-shot timers."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class QtScheduler:
    """Fires callbacks on the Qt event loop, i.e. on the GUI thread."""

    def __init__(self, context: QObject | None = None) -> None:
        self._context = context

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if self._context is not None:
            # Dropped automatically if the context object is destroyed first.
            QTimer.singleShot(delay_ms, self._context, callback)
        else:
            QTimer.singleShot(delay_ms, callback)
