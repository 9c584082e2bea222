"""Shared fixtures for the euljitype tests."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from euljitype.core.content import Difficulty, Language, PracticeMode  # noqa: E402


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pools():
    return {
        Language.ENGLISH: {
            PracticeMode.WORD: {
                Difficulty.EASY: ["cat", "dog"],
                Difficulty.MEDIUM: ["orange"],
                Difficulty.HARD: ["rhythm"],
            },
            PracticeMode.SENTENCE: {
                Difficulty.EASY: ["abc"],
                Difficulty.MEDIUM: ["The cat sat."],
                Difficulty.HARD: ["Quick brown fox."],
            },
            PracticeMode.PARAGRAPH: ["One. Two."],
        },
        Language.KOREAN: {
            PracticeMode.WORD: {
                Difficulty.EASY: ["가"],
                Difficulty.MEDIUM: ["사과"],
                Difficulty.HARD: ["컴퓨터"],
            },
            PracticeMode.SENTENCE: {
                Difficulty.EASY: ["한글"],
                Difficulty.MEDIUM: ["안녕하세요"],
                Difficulty.HARD: ["대한민국 만세"],
            },
            PracticeMode.PARAGRAPH: ["가. 나."],
        },
    }
