"""Riddle game."""

from .riddles import RiddleGame, check_answer, normalize_answer

__all__ = ["RiddleGame", "check_answer", "normalize_answer"]
