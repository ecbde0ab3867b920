"""Category model for the tiles game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DifficultyTier(Enum):
    """Difficulty bands; each maps to a rank, a point value and a label."""

    EASY = (1, 100, "Straightforward")
    MEDIUM = (2, 150, "Requires thought")
    HARD = (3, 200, "Tricky connections")
    TRICKY = (4, 250, "Very challenging")

    @property
    def rank(self) -> int:
        return self.value[0]

    @property
    def points(self) -> int:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.value[2]


@dataclass(frozen=True, eq=False)
class Category:
    """A hidden group of four tiles.

    ``color`` is an opaque presentation tag; the engine never reads it.
    Two categories compare equal when their names match.
    """

    name: str
    description: str = ""
    difficulty: DifficultyTier = DifficultyTier.MEDIUM
    color: str = "grey"

    def __post_init__(self) -> None:
        if self.name is None or not self.name.strip():
            raise ValueError("Category name cannot be empty.")
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(
            self, "description", (self.description or "").strip()
        )
        if self.difficulty is None:
            object.__setattr__(self, "difficulty", DifficultyTier.MEDIUM)

    @property
    def points(self) -> int:
        return self.difficulty.points

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"
