"""Riddle game - Answer checking and score keeping."""

import random
from typing import Optional

from nuvia.flows.riddle import get_riddle
from nuvia.models.game import GetRiddleInput, Riddle

ARTICLES = ("a ", "an ", "the ")


def normalize_answer(answer: str) -> str:
    """Lower-case, trim and drop one leading article."""
    lowered = answer.lower().strip()
    for article in ARTICLES:
        if lowered.startswith(article):
            return lowered[len(article):].strip()
    return lowered


def check_answer(riddle: Riddle, user_answer: str) -> bool:
    """Check a guess against the riddle's answer, ignoring case and articles."""
    if not user_answer or not user_answer.strip():
        return False
    return normalize_answer(user_answer) == normalize_answer(riddle.answer)


class RiddleGame:
    """
    Tracks the current riddle, the ids already shown and the score.

    When the bank is exhausted the riddle flow starts repeating; the game
    notices that and restarts its shown list from the repeated riddle.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng
        self.score = 0
        self.shown_ids: list[str] = []
        self.current: Optional[Riddle] = None
        self.answered = False

    def next_riddle(self) -> Riddle:
        """Fetch a riddle that has not been shown yet, when one remains."""
        riddle = get_riddle(GetRiddleInput(exclude_ids=self.shown_ids), rng=self.rng)

        if riddle.id in self.shown_ids:
            # The bank cycled
            self.shown_ids = [riddle.id]
        else:
            self.shown_ids.append(riddle.id)

        self.current = riddle
        self.answered = False
        return riddle

    def submit(self, user_answer: str) -> tuple[bool, str]:
        """
        Submit an answer for the current riddle.

        Returns:
            (correct, feedback message)

        Raises:
            RuntimeError: If no riddle is in play
        """
        if self.current is None:
            raise RuntimeError("No riddle in play; call next_riddle() first")

        correct = check_answer(self.current, user_answer)
        if correct and not self.answered:
            self.score += 1
        self.answered = True

        if correct:
            return True, f"🎉 Correct! You're sharp as ever! The answer was: {self.current.answer}"
        return False, f"❌ Not quite! The right answer was: {self.current.answer}. Keep trying!"
