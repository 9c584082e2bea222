"""PyQt6 adapters driving the scoring core from widget events."""

from .live_stats import LiveStatsTimer
from .practice_controller import PracticeController
from .position_controller import PositionDrillController

__all__ = ['LiveStatsTimer', 'PracticeController', 'PositionDrillController']
