"""Tracks the counters of a game in progress."""

from __future__ import annotations

from backend.models.category import Category

MAX_MISTAKES = 4
MISTAKE_PENALTY = 25
HINT_PENALTY = 50


class GameState:
    """Holds score, mistakes, hints used, solved categories and end flags."""

    def __init__(self) -> None:
        self.score: int = 0
        self.mistakes: int = 0
        self.hints_used: int = 0
        self.solved: list[Category] = []
        self.game_over: bool = False
        self.game_won: bool = False

    # -- scoring --------------------------------------------------------------

    def award(self, points: int) -> None:
        self.score += points

    def penalize(self, points: int) -> None:
        """Subtract *points*, never going below zero."""
        self.score = max(0, self.score - points)

    # -- transitions ----------------------------------------------------------

    def record_solved(self, category: Category, groups: int) -> None:
        self.solved.append(category)
        self.award(category.points)
        if len(self.solved) == groups:
            self.game_won = True
            self.game_over = True

    def record_mistake(self) -> None:
        self.mistakes += 1
        self.penalize(MISTAKE_PENALTY)
        if self.mistakes >= MAX_MISTAKES:
            self.game_over = True
            self.game_won = False

    def record_hint(self) -> None:
        self.hints_used += 1
        self.penalize(HINT_PENALTY)

    def clear(self) -> None:
        self.score = 0
        self.mistakes = 0
        self.hints_used = 0
        self.solved.clear()
        self.game_over = False
        self.game_won = False

    @property
    def remaining_lives(self) -> int:
        return MAX_MISTAKES - self.mistakes
