"""Practice content selection."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Set, Union
from enum import Enum
import random


class Language(str, Enum):
    KOREAN = "korean"
    ENGLISH = "english"


class PracticeMode(str, Enum):
    POSITION = "position"
    WORD = "word"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Word and sentence pools are split by difficulty, paragraph pools are not
ModePool = Union[Sequence[str], Mapping[Difficulty, Sequence[str]]]
ContentPools = Mapping[Language, Mapping[PracticeMode, ModePool]]


class TextPicker:
    """Picks practice texts, avoiding repeats until a pool runs out."""

    def __init__(self, pools: ContentPools, rng: Optional[random.Random] = None):
        self.pools = pools
        self._rng = rng or random.Random()
        self.used_texts: Set[str] = set()

    def get_pool(self, language: Language, mode: PracticeMode,
                 difficulty: Difficulty = Difficulty.EASY) -> Sequence[str]:
        """Get the texts available for a language, mode and difficulty."""
        if mode == PracticeMode.POSITION:
            raise ValueError("Position practice has no text pool")

        pool = self.pools[language][mode]
        if isinstance(pool, Mapping):
            pool = pool[difficulty]
        if not pool:
            raise ValueError(f"Empty pool for {language.value}/{mode.value}")
        return pool

    def pick(self, language: Language, mode: PracticeMode,
             difficulty: Difficulty = Difficulty.EASY) -> str:
        """Pick a random text and remember it as used."""
        pool = self.get_pool(language, mode, difficulty)
        available = [text for text in pool if text not in self.used_texts]
        final_pool = available or list(pool)

        text = self._rng.choice(final_pool)
        self.used_texts.add(text)
        return text

