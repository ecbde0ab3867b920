"""Shared puzzle fixtures.

``puzzle`` builds the 16 tiles in category order (Fish, Gems, Books,
Money) so positions 0-3, 4-7, 8-11 and 12-15 each hold one group.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import GameEngine
from backend.models import Category, DifficultyTier, Tile

_WORDS = {
    "Fish": ("BASS", "SALMON", "TROUT", "TUNA"),
    "Gems": ("RUBY", "PEARL", "JADE", "OPAL"),
    "Books": ("FACE", "COOK", "NOTE", "MARK"),
    "Money": ("BREAD", "DOUGH", "CASH", "BUCKS"),
}


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category("Fish", "Types of fish", DifficultyTier.EASY, "yellow"),
        Category("Gems", "Precious stones", DifficultyTier.MEDIUM, "green"),
        Category("Books", "Book-related", DifficultyTier.HARD, "blue"),
        Category("Money", "Slang for money", DifficultyTier.TRICKY, "magenta"),
    ]


@pytest.fixture
def tiles(categories: list[Category]) -> list[Tile]:
    return [
        Tile(word, category)
        for category in categories
        for word in _WORDS[category.name]
    ]


@pytest.fixture
def engine(tiles: list[Tile], categories: list[Category]) -> GameEngine:
    return GameEngine(tiles, categories, rng=random.Random(1234))
