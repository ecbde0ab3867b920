"""Puzzle validation and custom puzzle files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.engine.gamegenerator import PuzzleGenerator
from backend.engine.gameplay import GameEngine
from backend.errors import PuzzleSetupError
from backend.models import Category, DifficultyTier, Tile


def _write_puzzle(path: Path, categories: list[dict]) -> Path:
    path.write_text(json.dumps({"categories": categories}))
    return path


def _entry(name: str, words: list[str], difficulty: str = "easy") -> dict:
    return {"name": name, "difficulty": difficulty, "words": words}


def test_default_puzzle_is_valid() -> None:
    tiles, categories = PuzzleGenerator.default_puzzle()
    PuzzleGenerator.validate_setup(tiles, categories)
    assert [c.difficulty for c in categories] == list(DifficultyTier)


@pytest.mark.parametrize(
    ("drop_tiles", "drop_categories", "reason"),
    [
        (1, 0, "16 tiles"),
        (0, 1, "4 categories"),
    ],
)
def test_validate_setup_counts(
    tiles: list[Tile],
    categories: list[Category],
    drop_tiles: int,
    drop_categories: int,
    reason: str,
) -> None:
    with pytest.raises(PuzzleSetupError, match=reason):
        PuzzleGenerator.validate_setup(
            tiles[: len(tiles) - drop_tiles],
            categories[: len(categories) - drop_categories],
        )


def test_validate_setup_unbalanced(
    tiles: list[Tile], categories: list[Category]
) -> None:
    unbalanced = tiles[:-1] + [Tile("CARP", categories[0])]
    with pytest.raises(PuzzleSetupError, match="Fish"):
        PuzzleGenerator.validate_setup(unbalanced, categories)
    assert not PuzzleGenerator.is_valid_setup(unbalanced, categories)


def test_validate_setup_missing_input() -> None:
    assert not PuzzleGenerator.is_valid_setup(None, None)


def test_from_puzzle_is_strict(
    tiles: list[Tile], categories: list[Category]
) -> None:
    with pytest.raises(PuzzleSetupError):
        GameEngine.from_puzzle(tiles[:12], categories)
    assert GameEngine.from_puzzle(tiles, categories).tiles() == tiles


def test_load_puzzle(tmp_path: Path) -> None:
    path = _write_puzzle(
        tmp_path / "puzzle.json",
        [
            _entry("Planets", ["mars", "venus", "earth", "pluto"], "easy"),
            _entry("Greek letters", ["alpha", "beta", "gamma", "delta"], "medium"),
            _entry("Chess", ["king", "queen", "rook", "pawn"], "hard"),
            _entry("Moons", ["io", "titan", "europa", "phobos"], "tricky"),
        ],
    )
    tiles, categories = PuzzleGenerator.load_puzzle(path)

    assert len(tiles) == 16
    assert tiles[0].word == "MARS"
    assert categories[3].difficulty is DifficultyTier.TRICKY
    assert GameEngine.from_puzzle(tiles, categories).categories() == categories


def test_load_puzzle_rejects_garbage(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(PuzzleSetupError):
        PuzzleGenerator.load_puzzle(path)

    path = _write_puzzle(tmp_path / "tier.json", [_entry("X", ["A"], "impossible")])
    with pytest.raises(PuzzleSetupError):
        PuzzleGenerator.load_puzzle(path)
