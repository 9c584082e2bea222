"""Keystroke cost of characters for CPM calculation."""

from __future__ import annotations

# Precomposed Hangul syllables: 19 leading x 21 vowels x 28 trailing slots
HANGUL_SYLLABLE_FIRST = 0xAC00
HANGUL_SYLLABLE_LAST = 0xD7A3
TRAILING_CONSONANT_SLOTS = 28

# Compatibility jamo (ㄱ..ㅣ) and conjoining jamo
HANGUL_COMPAT_JAMO = (0x3131, 0x3163)
HANGUL_JAMO = (0x1100, 0x11FF)


def is_hangul_syllable(char: str) -> bool:
    """Check if a character is a precomposed Hangul syllable."""
    code = ord(char)
    return HANGUL_SYLLABLE_FIRST <= code <= HANGUL_SYLLABLE_LAST


def is_hangul_jamo(char: str) -> bool:
    """Check if a character is a standalone Hangul consonant or vowel."""
    code = ord(char)
    return (HANGUL_COMPAT_JAMO[0] <= code <= HANGUL_COMPAT_JAMO[1]
            or HANGUL_JAMO[0] <= code <= HANGUL_JAMO[1])


def stroke_count(char: str) -> int:
    """Get the number of keystrokes needed to type a single character.

    A syllable takes one key for the leading consonant and one for the
    vowel, plus one more when it has a trailing consonant. Everything
    else, jamo included, is a single key.
    """
    if is_hangul_syllable(char):
        offset = ord(char) - HANGUL_SYLLABLE_FIRST
        trailing = offset % TRAILING_CONSONANT_SLOTS
        return 2 if trailing == 0 else 3

    if is_hangul_jamo(char):
        return 1

    return 1


def total_strokes(text: str) -> int:
    """Sum the keystroke cost of every character in text."""
    return sum(stroke_count(char) for char in text)
