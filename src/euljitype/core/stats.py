"""Statistics collection for typing attempts."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple
from dataclasses import dataclass
import logging
import math
import time

from .strokes import stroke_count

logger = logging.getLogger(__name__)

CHARS_PER_WORD = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


@dataclass
class SessionStats:
    """Raw counters and timestamps of a single attempt."""
    total_chars: int = 0
    correct_chars: int = 0
    incorrect_chars: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None


@dataclass(frozen=True)
class TypingResult:
    """Final result of a completed attempt."""
    wpm: int
    cpm: int
    accuracy: int
    error_rate: int
    total_time: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "wpm": self.wpm,
            "cpm": self.cpm,
            "accuracy": self.accuracy,
            "errorRate": self.error_rate,
            "totalTime": self.total_time,
        }


@dataclass(frozen=True)
class LiveStats:
    """Running estimate shown while an attempt is in progress."""
    wpm: int = 0
    cpm: int = 0
    accuracy: int = 100
    error_rate: int = 0

    @classmethod
    def zero(cls) -> LiveStats:
        """Baseline before anything is typed (accuracy is optimistic)."""
        return cls(wpm=0, cpm=0, accuracy=100, error_rate=0)

    def to_dict(self) -> Dict[str, int]:
        return {
            "wpm": self.wpm,
            "cpm": self.cpm,
            "accuracy": self.accuracy,
            "errorRate": self.error_rate,
        }


@dataclass(frozen=True)
class _Tally:
    """Scored counts shared by the final and the live computations."""
    typed: int
    correct: int
    incorrect: int
    strokes: int


class TypingStatsEngine:
    """Collects keystrokes of one attempt and derives speed and accuracy.

    Two scoring strategies sit behind ``calculate_result`` and
    ``get_current_stats``:

    * position-wise: compares the live input with the target index by
      index. This one is authoritative and is used whenever both strings
      are passed.
    * counters: uses the cumulative ``record_correct``/``record_incorrect``
      log. Kept only as a fallback for callers that do not pass strings.

    The two can disagree once the user corrects a character, because the
    counters remember the first attempt while the position-wise strategy
    sees only the final content.
    """

    def __init__(self, update_callback: Optional[Callable] = None,
                 clock: Callable[[], float] = time.time):
        self.update_callback = update_callback
        self._clock = clock
        self.stats = SessionStats()

    def start_typing(self) -> None:
        """Mark the start of an attempt."""
        self.stats.start_time = self._clock()
        self.stats.end_time = None
        logger.debug("Attempt started at %.3f", self.stats.start_time)
        self._notify_update()

    def end_typing(self) -> None:
        """Mark the end of an attempt."""
        self.stats.end_time = self._clock()
        logger.debug("Attempt ended at %.3f", self.stats.end_time)
        self._notify_update()

    def record_correct(self) -> None:
        """Count one correctly typed character."""
        self.stats.total_chars += 1
        self.stats.correct_chars += 1
        self._notify_update()

    def record_incorrect(self) -> None:
        """Count one mistyped character."""
        self.stats.total_chars += 1
        self.stats.incorrect_chars += 1
        self._notify_update()

    def reset_stats(self) -> None:
        """Reset all counters and timestamps for a new attempt."""
        self.stats = SessionStats()
        self._notify_update()

    def is_started(self) -> bool:
        return self.stats.start_time is not None

    def is_finished(self) -> bool:
        return self.stats.end_time is not None

    def get_elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        if self.stats.start_time is None:
            return 0.0
        end = self.stats.end_time if self.stats.end_time is not None else self._clock()
        return max(0.0, end - self.stats.start_time)

    def get_formatted_time(self) -> str:
        """Get formatted elapsed time string."""
        elapsed = self.get_elapsed_time()
        minutes = int(elapsed // 60)
        seconds = int(elapsed % 60)
        return f"{minutes:02d}:{seconds:02d}"

    def calculate_result(self, user_input: Optional[str] = None,
                         target_text: Optional[str] = None) -> Optional[TypingResult]:
        """Calculate the final result of the attempt.

        Returns None while nothing can be reported yet: before the attempt
        started, or when there is no typed input to score.
        """
        start_time = self.stats.start_time
        if start_time is None:
            return None

        end = self.stats.end_time if self.stats.end_time is not None else self._clock()
        seconds = max(0.0, end - start_time)

        tally = self._score(user_input, target_text)
        if tally is None:
            return None

        cpm, wpm, accuracy, error_rate = self._derive(tally, seconds)
        return TypingResult(
            wpm=wpm,
            cpm=cpm,
            accuracy=accuracy,
            error_rate=error_rate,
            total_time=round_half_up(seconds),
        )

    def get_current_stats(self, user_input: Optional[str] = None,
                          target_text: Optional[str] = None) -> LiveStats:
        """Estimate speed and accuracy of the attempt in progress.

        Elapsed time always runs to now. Never returns None: the zero
        baseline is returned when there is nothing to score.
        """
        start_time = self.stats.start_time
        if start_time is None:
            return LiveStats.zero()

        tally = self._score(user_input, target_text)
        if tally is None:
            return LiveStats.zero()

        seconds = max(0.0, self._clock() - start_time)
        cpm, wpm, accuracy, error_rate = self._derive(tally, seconds)
        return LiveStats(wpm=wpm, cpm=cpm, accuracy=accuracy, error_rate=error_rate)

    def _score(self, user_input: Optional[str],
               target_text: Optional[str]) -> Optional[_Tally]:
        if user_input is not None and target_text is not None:
            return self._score_positions(user_input, target_text)
        return self._score_counters()

    @staticmethod
    def _score_positions(user_input: str, target_text: str) -> Optional[_Tally]:
        """Compare the live input with the target index by index."""
        if not user_input:
            return None

        correct = 0
        incorrect = 0
        strokes = 0
        for i, char in enumerate(user_input):
            if i < len(target_text) and char == target_text[i]:
                correct += 1
                strokes += stroke_count(char)
            else:
                incorrect += 1

        return _Tally(typed=len(user_input), correct=correct,
                      incorrect=incorrect, strokes=strokes)

    def _score_counters(self) -> Optional[_Tally]:
        """Fallback on the cumulative keystroke counters."""
        # NOTE: one stroke per counted character, composed syllables
        # included; only the position-wise strategy knows the characters.
        if self.stats.total_chars == 0:
            return None
        return _Tally(typed=self.stats.total_chars,
                      correct=self.stats.correct_chars,
                      incorrect=self.stats.incorrect_chars,
                      strokes=self.stats.correct_chars)

    @staticmethod
    def _derive(tally: _Tally, seconds: float) -> Tuple[int, int, int, int]:
        minutes = seconds / 60.0
        cpm = round_half_up(tally.strokes / minutes) if minutes > 0 else 0
        wpm = round_half_up(cpm / CHARS_PER_WORD)
        accuracy = round_half_up(tally.correct / tally.typed * 100)
        error_rate = round_half_up(tally.incorrect / tally.typed * 100)
        return cpm, wpm, accuracy, error_rate

    def _notify_update(self) -> None:
        """Notify callback about statistics update."""
        if self.update_callback:
            try:
                self.update_callback()
            except Exception as e:
                logger.warning("Error in stats update callback: %s", e)
