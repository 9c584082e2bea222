"""Scoring and session logic, independent of any UI toolkit."""

from .strokes import stroke_count, total_strokes
from .stats import LiveStats, SessionStats, TypingResult, TypingStatsEngine
from .composition import CompositionBuffer, CompositionState
from .content import Difficulty, Language, PracticeMode, TextPicker
from .typing_engine import CharacterInfo, CharacterState, InputResult, TypingEngine
from .position import PositionDrill, PracticeLevel

__all__ = [
    'stroke_count',
    'total_strokes',
    'LiveStats',
    'SessionStats',
    'TypingResult',
    'TypingStatsEngine',
    'CompositionBuffer',
    'CompositionState',
    'Difficulty',
    'Language',
    'PracticeMode',
    'TextPicker',
    'CharacterInfo',
    'CharacterState',
    'InputResult',
    'TypingEngine',
    'PositionDrill',
    'PracticeLevel',
]
