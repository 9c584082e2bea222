"""Finger-placement drill: type one displayed key at a time."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence
from enum import Enum
import random

from .stats import round_half_up


class PracticeLevel(str, Enum):
    """Keyboard rows a drill can draw keys from."""
    HOME_ROW = "homeRow"
    TOP_ROW = "topRow"
    BOTTOM_ROW = "bottomRow"
    NUMBER_ROW = "numberRow"
    SYMBOLS = "symbols"
    ALL = "all"


class PositionDrill:
    """Tracks the current key, streak and accuracy of a drill."""

    def __init__(self, keys_by_level: Mapping[PracticeLevel, Sequence[str]],
                 level: PracticeLevel = PracticeLevel.ALL,
                 rng: Optional[random.Random] = None):
        self.keys_by_level = keys_by_level
        self.level = level
        self._rng = rng or random.Random()
        self.current_char = ""
        self.is_correct: Optional[bool] = None
        self.streak = 0
        self.total_correct = 0
        self.total_attempts = 0
        self.next_char()

    def next_char(self) -> str:
        """Pick a new random key from the current level."""
        keys = self.keys_by_level[self.level]
        if not keys:
            raise ValueError(f"No keys for level {self.level.value}")
        self.current_char = self._rng.choice(list(keys))
        self.is_correct = None
        return self.current_char

    def press(self, key: str) -> Optional[bool]:
        """Judge a pressed key against the current one.

        Returns True or False for a judged key, None when the key was
        ignored (named keys such as "Shift", or a key already answered).
        """
        if self.is_correct:
            return None

        if key.lower() == self.current_char.lower() or key == self.current_char:
            self.is_correct = True
            self.streak += 1
            self.total_correct += 1
            self.total_attempts += 1
            return True

        if len(key) == 1:
            self.is_correct = False
            self.streak = 0
            self.total_attempts += 1
            return False

        return None

    def set_level(self, level: PracticeLevel) -> None:
        """Switch rows; the streak starts over."""
        self.level = level
        self.streak = 0
        self.next_char()

    def reset(self) -> None:
        """Clear the streak and totals and pick a new key."""
        self.streak = 0
        self.total_correct = 0
        self.total_attempts = 0
        self.next_char()

    @property
    def accuracy(self) -> int:
        if self.total_attempts == 0:
            return 100
        return round_half_up(self.total_correct / self.total_attempts * 100)
