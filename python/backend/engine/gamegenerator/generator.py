"""Builds and checks puzzles: the built-in default set and custom files."""

from __future__ import annotations

import json
import random
from collections import Counter
from pathlib import Path

from backend.errors import PuzzleSetupError
from backend.models.category import Category, DifficultyTier
from backend.models.tile import Tile

TILES_PER_GROUP = 4
GROUPS_COUNT = 4
TOTAL_TILES = TILES_PER_GROUP * GROUPS_COUNT

# (name, description, tier, colour, words)
_DEFAULT_PUZZLE = (
    ("Fish", "Types of fish", DifficultyTier.EASY, "#f9df6d",
     ("BASS", "FLOUNDER", "SALMON", "TROUT")),
    ("Gems", "Precious stones", DifficultyTier.MEDIUM, "#a0c35a",
     ("RUBY", "PEARL", "JADE", "OPAL")),
    ("___BOOK", "Words before BOOK", DifficultyTier.HARD, "#b0c4ef",
     ("FACE", "COOK", "MATCH", "POCKET")),
    ("Slang Money", "Slang terms for money", DifficultyTier.TRICKY, "#ba81c5",
     ("BREAD", "DOUGH", "CHEDDAR", "CLAMS")),
)


class PuzzleGenerator:
    """Stateless helpers: all methods are static."""

    @staticmethod
    def default_puzzle() -> tuple[list[Tile], list[Category]]:
        """Return the built-in puzzle in category order (unshuffled)."""
        tiles: list[Tile] = []
        categories: list[Category] = []
        for name, description, tier, color, words in _DEFAULT_PUZZLE:
            category = Category(name, description, tier, color)
            categories.append(category)
            tiles.extend(Tile(word, category) for word in words)
        return tiles, categories

    @staticmethod
    def validate_setup(
        tiles: list[Tile] | None, categories: list[Category] | None
    ) -> None:
        """Raise :class:`PuzzleSetupError` unless the sets form a 4×4 partition."""
        if tiles is None or categories is None:
            raise PuzzleSetupError("Tiles and categories are required.")
        if len(tiles) != TOTAL_TILES:
            raise PuzzleSetupError(
                f"Expected {TOTAL_TILES} tiles, got {len(tiles)}."
            )
        if len(categories) != GROUPS_COUNT:
            raise PuzzleSetupError(
                f"Expected {GROUPS_COUNT} categories, got {len(categories)}."
            )

        counts = Counter(tile.category for tile in tiles)
        for category in categories:
            if counts.get(category, 0) != TILES_PER_GROUP:
                raise PuzzleSetupError(
                    f"Category {category.name!r} owns {counts.get(category, 0)} "
                    f"tiles, expected {TILES_PER_GROUP}."
                )

    @staticmethod
    def is_valid_setup(
        tiles: list[Tile] | None, categories: list[Category] | None
    ) -> bool:
        try:
            PuzzleGenerator.validate_setup(tiles, categories)
        except PuzzleSetupError:
            return False
        return True

    @staticmethod
    def shuffle(tiles: list[Tile], rng: random.Random | None = None) -> None:
        """Shuffle *tiles* in-place (Fisher–Yates via ``random.shuffle``)."""
        (rng or random).shuffle(tiles)

    @staticmethod
    def load_puzzle(path: Path) -> tuple[list[Tile], list[Category]]:
        """Read a custom puzzle file.

        The file holds ``{"categories": [{"name", "description",
        "difficulty", "color", "words": [...]}, ...]}``.  Only the shape of
        the document is checked here; pass the result through
        :meth:`validate_setup` (or the lenient engine constructor) to check
        the partition.

        Raises:
            OSError: the file cannot be read.
            PuzzleSetupError: the document is not a puzzle.
        """
        try:
            data = json.loads(Path(path).read_text())
            entries = data["categories"]
            tiles: list[Tile] = []
            categories: list[Category] = []
            for entry in entries:
                category = Category(
                    name=entry["name"],
                    description=entry.get("description", ""),
                    difficulty=DifficultyTier[
                        entry.get("difficulty", "MEDIUM").upper()
                    ],
                    color=entry.get("color", "grey"),
                )
                categories.append(category)
                tiles.extend(Tile(word, category) for word in entry["words"])
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise PuzzleSetupError(f"Invalid puzzle file {path}: {exc}") from exc
        return tiles, categories
