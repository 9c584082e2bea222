"""Configuration management for euljitype."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import json
import logging

from .core.content import Difficulty, Language, PracticeMode
from .core.position import PracticeLevel

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".euljitype" / "config.json"


@dataclass
class PracticeConfig:
    """What to practice."""
    language: str = "korean"  # "korean" or "english"
    mode: str = "sentence"  # "position", "word", "sentence" or "paragraph"
    difficulty: str = "easy"  # "easy", "medium" or "hard"
    position_level: str = "all"


@dataclass
class TimingConfig:
    """Timer settings, in milliseconds."""
    live_update_interval_ms: int = 100
    auto_advance_delay_ms: int = 300


@dataclass
class Config:
    """Main configuration class."""
    practice: PracticeConfig = field(default_factory=PracticeConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Config:
        """Create Config from dictionary.

        Sections of the wrong type and unknown choices are replaced by
        their defaults.
        """
        config = cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring config of type %s", type(data).__name__)
            return config

        practice_data = _section(data, "practice")
        config.practice.language = _choice(
            practice_data, "language", config.practice.language, Language)
        config.practice.mode = _choice(
            practice_data, "mode", config.practice.mode, PracticeMode)
        config.practice.difficulty = _choice(
            practice_data, "difficulty", config.practice.difficulty, Difficulty)
        config.practice.position_level = _choice(
            practice_data, "positionLevel", config.practice.position_level, PracticeLevel)

        timing_data = _section(data, "timing")
        config.timing.live_update_interval_ms = _interval(
            timing_data, "liveUpdateIntervalMs", config.timing.live_update_interval_ms)
        config.timing.auto_advance_delay_ms = _interval(
            timing_data, "autoAdvanceDelayMs", config.timing.auto_advance_delay_ms)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "practice": {
                "language": self.practice.language,
                "mode": self.practice.mode,
                "difficulty": self.practice.difficulty,
                "positionLevel": self.practice.position_level,
            },
            "timing": {
                "liveUpdateIntervalMs": self.timing.live_update_interval_ms,
                "autoAdvanceDelayMs": self.timing.auto_advance_delay_ms,
            },
        }


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = data.get(key, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring config section %r of type %s", key, type(section).__name__)
        return {}
    return section


def _choice(section: Dict[str, Any], key: str, default: str, choices: Type[Enum]) -> str:
    value = section.get(key, default)
    if value not in [choice.value for choice in choices]:
        logger.warning("Unknown %s %r in config, using %r", key, value, default)
        return default
    return value


def _interval(section: Dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        logger.warning("Invalid %s %r in config, using %d", key, value, default)
        return default
    return value


class ConfigManager:
    """Loads and saves the configuration as a JSON file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """Load configuration, falling back to defaults."""
        if self._config is None:
            try:
                if self.path.exists():
                    with open(self.path, "r", encoding="utf-8") as f:
                        self._config = Config.from_dict(json.load(f))
                else:
                    self._config = Config()
            except (OSError, ValueError) as e:
                logger.warning("Failed to load config from %s, using defaults: %s", self.path, e)
                self._config = Config()
        return self._config

    def save_config(self, config: Config) -> None:
        """Write configuration to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        self._config = config

    def get_config(self) -> Config:
        """Get current configuration."""
        return self.load_config()

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self.save_config(Config())


# Global config manager instance
config_manager = ConfigManager()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config_manager.get_config()


def save_config(config: Config) -> None:
    """Save the global configuration instance."""
    config_manager.save_config(config)
