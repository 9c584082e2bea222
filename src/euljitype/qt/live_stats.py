"""Periodic live statistics refresh."""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..core.stats import LiveStats


class LiveStatsTimer(QObject):
    """Recomputes live statistics on a fixed interval while running."""

    # Signals
    stats_updated = pyqtSignal(object)  # LiveStats

    def __init__(self, provider: Callable[[], LiveStats], interval_ms: int = 100,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._provider = provider

        self._tick = QTimer(self)
        self._tick.setInterval(interval_ms)
        self._tick.timeout.connect(self._on_tick)

    def start(self) -> None:
        if not self._tick.isActive():
            self._tick.start()

    def stop(self) -> None:
        self._tick.stop()

    def is_active(self) -> bool:
        return self._tick.isActive()

    def interval(self) -> int:
        return self._tick.interval()

    def _on_tick(self) -> None:
        self.stats_updated.emit(self._provider())
