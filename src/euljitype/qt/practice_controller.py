"""Qt driver for word, sentence and paragraph typing tests."""

from __future__ import annotations

from typing import Optional
import logging

from PyQt6.QtCore import QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtGui import QInputMethodEvent, QKeyEvent

from ..config import Config, get_config
from ..core.content import Difficulty, Language, PracticeMode, TextPicker
from ..core.stats import LiveStats, TypingStatsEngine
from ..core.typing_engine import InputResult, TypingEngine
from .live_stats import LiveStatsTimer

logger = logging.getLogger(__name__)


class PracticeController(QObject):
    """Feeds Qt key and input method events into a typing attempt.

    Install it as an event filter on the input widget, or call
    ``handle_key_event`` / ``handle_input_method_event`` directly.
    Live statistics are emitted every tick while an attempt is running;
    the timer never outlives the attempt it belongs to.
    """

    # Signals
    text_changed = pyqtSignal(str)
    input_changed = pyqtSignal(str)
    live_stats_changed = pyqtSignal(object)  # LiveStats
    attempt_completed = pyqtSignal(object)  # TypingResult

    def __init__(self, picker: TextPicker, config: Optional[Config] = None,
                 stats: Optional[TypingStatsEngine] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config or get_config()
        self.picker = picker
        self.language = Language(self.config.practice.language)
        self.mode = PracticeMode(self.config.practice.mode)
        self.difficulty = Difficulty(self.config.practice.difficulty)

        self.engine = TypingEngine("", self.mode, stats)
        self.live_timer = LiveStatsTimer(
            self.engine.live_stats,
            self.config.timing.live_update_interval_ms,
            self,
        )
        self.live_timer.stats_updated.connect(self.live_stats_changed)

    def new_text(self) -> str:
        """Start a new attempt on a freshly picked text."""
        self.live_timer.stop()
        text = self.picker.pick(self.language, self.mode, self.difficulty)
        self.engine.set_target_text(text, self.mode)
        logger.debug("New %s %s text: %.30s", self.language.value, self.mode.value, text)

        self.text_changed.emit(text)
        self.input_changed.emit("")
        self.live_stats_changed.emit(LiveStats.zero())
        return text

    def restart(self) -> None:
        """Start the current text over."""
        self.live_timer.stop()
        self.engine.reset()
        self.input_changed.emit("")
        self.live_stats_changed.emit(LiveStats.zero())

    def set_practice(self, language: Optional[Language] = None,
                     mode: Optional[PracticeMode] = None,
                     difficulty: Optional[Difficulty] = None) -> str:
        """Change what is practiced and pick a new text."""
        if language is not None:
            self.language = language
        if mode is not None:
            self.mode = mode
        if difficulty is not None:
            self.difficulty = difficulty
        return self.new_text()

    def teardown(self) -> None:
        """Stop timers before the controller is discarded."""
        self.live_timer.stop()

    def handle_input_method_event(self, event: QInputMethodEvent) -> InputResult:
        """Apply the commit string, then the new preedit text.

        A replacement range before the cursor (negative start) removes
        committed characters first. Ranges inside or after the preedit
        are not supported and are ignored.
        """
        start = event.replacementStart()
        length = event.replacementLength()
        if length > 0:
            if start < 0:
                self.engine.retract(min(-start, length))
            else:
                logger.debug("Ignoring input method replacement at %d+%d", start, length)

        commit = event.commitString()
        if not commit:
            return self._after_input(self.engine.update_composition(event.preeditString()))

        result = self.engine.commit_text(commit)
        if not self.engine.is_completed:
            self.engine.update_composition(event.preeditString())
        return self._after_input(result)

    def handle_key_event(self, event: QKeyEvent) -> Optional[InputResult]:
        """Handle a key press; returns None for keys that are not used."""
        key = event.key()
        text = event.text()

        if key == Qt.Key.Key_Backspace:
            result = self.engine.backspace()
        elif key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            result = self.engine.handle_enter()
        elif text and text.isprintable():
            result = self.engine.commit_text(text)
        else:
            return None

        return self._after_input(result)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.InputMethod:
            self.handle_input_method_event(event)
            return True
        if event.type() == QEvent.Type.KeyPress:
            return self.handle_key_event(event) is not None
        return super().eventFilter(watched, event)

    def _after_input(self, result: InputResult) -> InputResult:
        self.input_changed.emit(self.engine.display_text)

        if result.is_complete:
            self.live_timer.stop()
            # Input after completion is rejected, so this reports once
            if result.accepted:
                final = self.engine.result()
                if final is not None:
                    logger.debug("Attempt completed: %s", final)
                    self.attempt_completed.emit(final)
        elif self.engine.is_started:
            self.live_timer.start()

        return result
