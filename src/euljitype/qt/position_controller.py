"""Qt driver for the finger-placement drill."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QEvent, QObject, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QInputMethodEvent, QKeyEvent

from ..config import Config, get_config
from ..core.position import PositionDrill, PracticeLevel


class PositionDrillController(QObject):
    """Feeds key presses into a drill and advances after a correct key."""

    # Signals
    char_changed = pyqtSignal(str)
    verdict = pyqtSignal(object)  # True, False or None

    def __init__(self, drill: PositionDrill, config: Optional[Config] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config or get_config()
        self.drill = drill

        # Timers
        self._advance_timer = QTimer(self)
        self._advance_timer.setSingleShot(True)
        self._advance_timer.setInterval(self.config.timing.auto_advance_delay_ms)
        self._advance_timer.timeout.connect(self._advance)

        # Set while the judged key is still the pending preedit text
        self._preedit_judged = False

    def is_advance_pending(self) -> bool:
        return self._advance_timer.isActive()

    def handle_key_event(self, event: QKeyEvent) -> Optional[bool]:
        """Judge a key press; Escape skips to another key."""
        if event.key() == Qt.Key.Key_Escape:
            self.skip()
            return None

        text = event.text()
        if not text or not text.isprintable():
            return None
        return self.press(text)

    def handle_input_method_event(self, event: QInputMethodEvent) -> Optional[bool]:
        """Judge a key typed through an input method.

        A Korean key first shows up as preedit text and is judged then.
        Its later commit is not judged again.
        """
        preedit = event.preeditString()
        if preedit:
            self._preedit_judged = True
            return self.press(preedit[0])

        commit = event.commitString()
        if self._preedit_judged:
            self._preedit_judged = False
            return None
        if not commit:
            return None
        return self.press(commit[0])

    def press(self, key: str) -> Optional[bool]:
        outcome = self.drill.press(key)
        if outcome is None:
            return None

        self.verdict.emit(outcome)
        if outcome:
            self._advance_timer.start()
        return outcome

    def skip(self) -> None:
        """Move to another key without judging the current one."""
        self._advance_timer.stop()
        self._advance()

    def set_level(self, level: PracticeLevel) -> None:
        self._advance_timer.stop()
        self.drill.set_level(level)
        self.char_changed.emit(self.drill.current_char)

    def reset(self) -> None:
        """Cancel a pending advance and start the drill over."""
        self._advance_timer.stop()
        self.drill.reset()
        self.char_changed.emit(self.drill.current_char)

    def teardown(self) -> None:
        """Stop timers before the controller is discarded."""
        self._advance_timer.stop()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.InputMethod:
            self.handle_input_method_event(event)
            return True
        if event.type() == QEvent.Type.KeyPress:
            return self.handle_key_event(event) is not None
        return super().eventFilter(watched, event)

    def _advance(self) -> None:
        self.drill.next_char()
        self.char_changed.emit(self.drill.current_char)
