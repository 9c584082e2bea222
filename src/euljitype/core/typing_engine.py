"""Core typing engine for word, sentence and paragraph tests."""

from __future__ import annotations

from typing import List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum
import logging
import re

from .composition import CompositionBuffer
from .content import PracticeMode
from .stats import LiveStats, TypingResult, TypingStatsEngine

logger = logging.getLogger(__name__)

# Paragraphs are shown one sentence per line
_SENTENCE_BREAK = re.compile(r"(?<=\.) ")


class CharacterState(Enum):
    """State of a character in the typing exercise."""
    UNDEFINED = "undefined"  # Not typed yet
    CORRECT = "correct"      # Typed correctly
    CURRENT = "current"      # Current position to type
    ERROR = "error"          # Contains error


@dataclass
class CharacterInfo:
    """Information about a single target character."""
    char: str
    state: CharacterState
    position: int


@dataclass
class InputResult:
    """Result of an input operation."""
    accepted: bool
    is_complete: bool
    error_occurred: bool
    user_input: str
    current_position: int


class TypingEngine:
    """Runs one attempt at typing a fixed target text.

    Finalized characters are scored once, in arrival order, before any
    snapshot is read. Characters still being composed by the input method
    are displayed but never scored.
    """

    def __init__(self, target_text: str, mode: PracticeMode = PracticeMode.SENTENCE,
                 stats: Optional[TypingStatsEngine] = None):
        self.target_text = target_text
        self.mode = mode
        self.stats = stats or TypingStatsEngine()
        self.composition = CompositionBuffer()
        self._reset_state()

    def _reset_state(self) -> None:
        """Reset the internal state and the statistics."""
        self.user_input = ""
        self.is_started = False
        self.is_completed = False
        self.composition.cancel()
        self.stats.reset_stats()

    @property
    def current_position(self) -> int:
        return len(self.user_input)

    @property
    def display_text(self) -> str:
        """Committed input followed by the text still being composed."""
        return self.user_input + self.composition.preedit

    def _ensure_started(self) -> None:
        if not self.is_started:
            self.is_started = True
            self.stats.start_typing()

    def _check_complete(self) -> bool:
        if not self.is_completed and len(self.user_input) == len(self.target_text):
            self.is_completed = True
            self.composition.cancel()
            self.stats.end_typing()
            logger.debug("Attempt complete: %d characters", len(self.target_text))
        return self.is_completed

    def _record(self, char: str, position: int) -> bool:
        """Record one keystroke against the target at position."""
        is_correct = position < len(self.target_text) and char == self.target_text[position]
        if is_correct:
            self.stats.record_correct()
        else:
            self.stats.record_incorrect()
        return is_correct

    def update_composition(self, preedit: str) -> InputResult:
        """Show text the input method is still assembling."""
        if self.is_completed:
            return self._create_result(accepted=False, error_occurred=False)

        if preedit:
            self._ensure_started()
        self.composition.update(preedit)
        return self._create_result(accepted=True, error_occurred=False)

    def commit_text(self, text: str) -> InputResult:
        """Score finalized characters one by one and append them."""
        if self.is_completed:
            return self._create_result(accepted=False, error_occurred=False)

        committed = self.composition.commit(text)
        error_occurred = False
        for char in committed:
            self._ensure_started()
            if not self._record(char, len(self.user_input)):
                error_occurred = True
            self.user_input += char
            if self._check_complete():
                break

        return self._create_result(accepted=bool(committed), error_occurred=error_occurred)

    def handle_input_change(self, value: str) -> InputResult:
        """Replace the input with the full value of a text widget.

        Only the last character is scored, and only when the value grew.
        """
        if self.is_completed:
            return self._create_result(accepted=False, error_occurred=False)

        if value:
            self._ensure_started()

        error_occurred = False
        if len(value) > len(self.user_input):
            position = len(value) - 1
            error_occurred = not self._record(value[position], position)

        self.user_input = value
        self._check_complete()
        return self._create_result(accepted=True, error_occurred=error_occurred)

    def backspace(self) -> InputResult:
        """Remove the last committed character."""
        if self.is_completed or self.composition.is_composing or not self.user_input:
            return self._create_result(accepted=False, error_occurred=False)

        self.user_input = self.user_input[:-1]
        return self._create_result(accepted=True, error_occurred=False)

    def retract(self, count: int) -> InputResult:
        """Drop the last count committed characters.

        Used when the input method revises text it already committed; the
        replacement arrives through ``commit_text`` and is scored there.
        """
        if self.is_completed or count <= 0 or not self.user_input:
            return self._create_result(accepted=False, error_occurred=False)

        self.user_input = self.user_input[:-count]
        return self._create_result(accepted=True, error_occurred=False)

    def handle_enter(self) -> InputResult:
        """Move to the next paragraph line at the end of the current one."""
        if self.is_completed or self.mode != PracticeMode.PARAGRAPH:
            return self._create_result(accepted=False, error_occurred=False)

        length = len(self.user_input)
        if length != self.current_line_end(length) or length >= len(self.target_text):
            return self._create_result(accepted=False, error_occurred=False)

        if self.target_text[length] != " ":
            return self._create_result(accepted=False, error_occurred=False)

        self._ensure_started()
        self.stats.record_correct()
        self.user_input += " "
        self._check_complete()
        return self._create_result(accepted=True, error_occurred=False)

    def lines(self) -> List[Tuple[str, int]]:
        """Split the target into display lines with their start index."""
        if self.mode != PracticeMode.PARAGRAPH:
            return [(self.target_text, 0)]

        lines = []
        current_index = 0
        sentences = _SENTENCE_BREAK.split(self.target_text)
        for i, sentence in enumerate(sentences):
            lines.append((sentence, current_index))
            current_index += len(sentence)
            if i < len(sentences) - 1:
                current_index += 1
        return lines

    def current_line_end(self, input_length: int) -> int:
        """Get the index where the line containing input_length ends."""
        for sentence, start in self.lines():
            line_end = start + len(sentence)
            if input_length <= line_end:
                return line_end
        return len(self.target_text)

    def get_characters(self) -> List[CharacterInfo]:
        """Get per-character state of the target text."""
        characters = []
        for i, char in enumerate(self.target_text):
            if i < len(self.user_input):
                if self.user_input[i] == char:
                    state = CharacterState.CORRECT
                else:
                    state = CharacterState.ERROR
            elif i == len(self.user_input):
                state = CharacterState.CURRENT
            else:
                state = CharacterState.UNDEFINED
            characters.append(CharacterInfo(char=char, state=state, position=i))
        return characters

    def get_progress_percentage(self) -> float:
        """Get progress as percentage (0.0 to 1.0)."""
        if not self.target_text:
            return 1.0
        return min(1.0, len(self.user_input) / len(self.target_text))

    def live_stats(self) -> LiveStats:
        """Running statistics from the committed input."""
        return self.stats.get_current_stats(self.user_input, self.target_text)

    def result(self) -> Optional[TypingResult]:
        """Final result, available once the attempt is complete."""
        if not self.is_completed:
            return None
        return self.stats.calculate_result(self.user_input, self.target_text)

    def reset(self) -> None:
        """Restart the attempt on the same text."""
        self._reset_state()

    def set_target_text(self, target_text: str,
                        mode: Optional[PracticeMode] = None) -> None:
        """Set new target text and reset state."""
        self.target_text = target_text
        if mode is not None:
            self.mode = mode
        self._reset_state()

    def _create_result(self, accepted: bool, error_occurred: bool) -> InputResult:
        return InputResult(
            accepted=accepted,
            is_complete=self.is_completed,
            error_occurred=error_occurred,
            user_input=self.user_input,
            current_position=self.current_position,
        )
