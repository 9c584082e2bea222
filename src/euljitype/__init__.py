"""Korean and English typing practice: stroke counting and typing statistics."""

from __future__ import annotations

from .core import (
    CharacterState,
    Difficulty,
    Language,
    LiveStats,
    PositionDrill,
    PracticeLevel,
    PracticeMode,
    TextPicker,
    TypingEngine,
    TypingResult,
    TypingStatsEngine,
    stroke_count,
    total_strokes,
)

__version__ = "1.0.0"

__all__ = [
    'CharacterState',
    'Difficulty',
    'Language',
    'LiveStats',
    'PositionDrill',
    'PracticeLevel',
    'PracticeMode',
    'TextPicker',
    'TypingEngine',
    'TypingResult',
    'TypingStatsEngine',
    'stroke_count',
    'total_strokes',
]
