"""Input method composition tracking."""

from __future__ import annotations

from enum import Enum


class CompositionState(Enum):
    """Whether the input method is assembling a character."""
    COMMITTED = "committed"  # Nothing pending, finalized text only
    COMPOSING = "composing"  # Preedit text is still changing


class CompositionBuffer:
    """Holds preedit text until the input method finalizes it.

    A Korean syllable such as 각 arrives as a series of preedit updates
    (ㄱ, 가, 각) followed by a single commit. Only the commit may be
    scored, and only once.
    """

    def __init__(self):
        self.state = CompositionState.COMMITTED
        self.preedit = ""

    @property
    def is_composing(self) -> bool:
        return self.state == CompositionState.COMPOSING

    def update(self, preedit: str) -> None:
        """Replace the pending preedit text."""
        self.preedit = preedit
        if preedit:
            self.state = CompositionState.COMPOSING
        else:
            self.state = CompositionState.COMMITTED

    def commit(self, text: str) -> str:
        """Finalize text and leave the composing state.

        Returns the characters to score.
        """
        self.preedit = ""
        self.state = CompositionState.COMMITTED
        return text

    def cancel(self) -> None:
        """Drop any pending preedit text."""
        self.update("")
