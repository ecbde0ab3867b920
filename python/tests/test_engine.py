"""GameEngine: validation, scoring, lives, hints, shuffle and reset."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import PuzzleGenerator
from backend.engine.gameplay import GameEngine
from backend.engine.gamestate import MAX_MISTAKES
from backend.models import Category, Tile


def _select(engine: GameEngine, *positions: int) -> None:
    board = engine.tiles()
    for i in positions:
        board[i].select(True)


def _select_category(engine: GameEngine, name: str) -> None:
    for tile in engine.tiles():
        if tile.category.name == name:
            tile.select(True)


# -- construction -------------------------------------------------------------


def test_default_engine_uses_builtin_puzzle() -> None:
    engine = GameEngine(rng=random.Random(3))
    assert len(engine.tiles()) == 16
    assert [c.name for c in engine.categories()] == [
        "Fish", "Gems", "___BOOK", "Slang Money",
    ]
    assert PuzzleGenerator.is_valid_setup(engine.tiles(), engine.categories())


def test_custom_puzzle_keeps_supplied_order(
    engine: GameEngine, tiles: list[Tile]
) -> None:
    assert engine.tiles() == tiles


def test_invalid_puzzle_falls_back_to_default(
    tiles: list[Tile], categories: list[Category]
) -> None:
    engine = GameEngine(tiles[:15], categories)
    assert "Slang Money" in [c.name for c in engine.categories()]

    unbalanced = tiles[:-1] + [Tile("EXTRA", categories[0])]
    engine = GameEngine(unbalanced, categories)
    assert "Slang Money" in [c.name for c in engine.categories()]


def test_defensive_copies(engine: GameEngine) -> None:
    engine.tiles().clear()
    engine.categories().clear()
    engine.solved_categories().append(Category("Bogus"))
    assert len(engine.tiles()) == 16
    assert len(engine.categories()) == 4
    assert engine.solved_categories() == []


# -- validation ---------------------------------------------------------------


def test_validate_correct_group(engine: GameEngine, categories: list[Category]) -> None:
    _select(engine, 0, 1, 2, 3)
    outcome = engine.validate_selection()
    assert outcome.valid
    assert outcome.category == categories[0]
    assert outcome.message == "Correct!"


def test_validate_mixed_group(engine: GameEngine) -> None:
    _select(engine, 0, 1, 4, 8)
    outcome = engine.validate_selection()
    assert not outcome.valid
    assert "Not all" in outcome.message
    assert outcome.category is None


def test_validate_too_few(engine: GameEngine) -> None:
    for count in range(4):
        engine.deselect_all()
        _select(engine, *range(count))
        outcome = engine.validate_selection()
        assert not outcome.valid
        assert "Select exactly 4" in outcome.message


def test_validate_too_many(engine: GameEngine) -> None:
    _select(engine, 0, 1, 2, 3, 4)
    assert not engine.validate_selection().valid


def test_selected_tiles_in_board_order(engine: GameEngine) -> None:
    _select(engine, 9, 2, 5)
    assert [t.word for t in engine.selected_tiles()] == ["TROUT", "PEARL", "COOK"]


# -- matches and mistakes -----------------------------------------------------


def test_match_marks_exactly_its_tiles(
    engine: GameEngine, categories: list[Category]
) -> None:
    engine.process_match(categories[0])
    for tile in engine.tiles():
        assert tile.matched == (tile.category == categories[0])
    assert engine.solved_categories() == [categories[0]]
    assert len(engine.unmatched_tiles()) == 12


def test_scoring_by_difficulty(engine: GameEngine, categories: list[Category]) -> None:
    expected = [100, 250, 450, 700]
    for category, total in zip(categories, expected):
        assert not engine.is_won
        engine.process_match(category)
        assert engine.score == total
    assert engine.is_won
    assert engine.is_over


def test_mistake_penalty_and_floor(
    engine: GameEngine, categories: list[Category]
) -> None:
    engine.process_match(categories[0])
    engine.process_mistake()
    assert engine.score == 75
    assert engine.mistakes == 1

    for _ in range(10):
        engine.process_mistake()
    assert engine.score == 0
    assert engine.mistakes == MAX_MISTAKES


def test_mistake_clears_whole_selection(engine: GameEngine) -> None:
    _select(engine, 0, 5, 10)
    engine.process_mistake()
    assert engine.selected_tiles() == []


def test_four_mistakes_end_the_game(engine: GameEngine) -> None:
    assert engine.remaining_lives() == 4
    for _ in range(3):
        engine.process_mistake()
        assert not engine.is_over
    assert engine.remaining_lives() == 1

    engine.process_mistake()
    assert engine.is_over
    assert not engine.is_won
    assert engine.remaining_lives() == 0


def test_no_scoring_after_game_over(
    engine: GameEngine, categories: list[Category]
) -> None:
    for _ in range(MAX_MISTAKES):
        engine.process_mistake()
    engine.process_match(categories[0])
    assert engine.score == 0
    assert engine.solved_categories() == []
    assert not engine.is_won


def test_default_fish_scenario() -> None:
    engine = GameEngine(rng=random.Random(11))
    _select_category(engine, "Fish")

    outcome = engine.validate_selection()
    assert outcome.valid
    assert outcome.category.name == "Fish"

    engine.process_match(outcome.category)
    assert engine.score == 100
    assert [c.name for c in engine.solved_categories()] == ["Fish"]
    fish = [t for t in engine.tiles() if t.category.name == "Fish"]
    assert len(fish) == 4
    assert all(t.matched and not t.selected for t in fish)


# -- hints --------------------------------------------------------------------


def test_hint_without_selection_is_free(
    engine: GameEngine, categories: list[Category]
) -> None:
    engine.process_match(categories[0])
    message = engine.use_hint()
    assert "Select at least" in message
    assert engine.score == 100
    assert engine.hints_used == 0


def test_hint_names_first_selected_tile(
    engine: GameEngine, categories: list[Category]
) -> None:
    engine.process_match(categories[0])
    _select(engine, 13, 4)

    message = engine.use_hint()
    assert message == '"RUBY" belongs to: Gems'
    assert engine.score == 50
    assert engine.hints_used == 1


def test_hint_penalty_floors_at_zero(engine: GameEngine) -> None:
    _select(engine, 4)
    engine.use_hint()
    assert engine.score == 0
    assert engine.hints_used == 1


# -- shuffle, deselect, reset -------------------------------------------------


def test_shuffle_keeps_tiles_and_flags(
    engine: GameEngine, categories: list[Category]
) -> None:
    engine.process_match(categories[1])
    _select(engine, 0, 1)
    before = {t.word: (t.selected, t.matched) for t in engine.tiles()}

    engine.shuffle_tiles()
    after = {t.word: (t.selected, t.matched) for t in engine.tiles()}
    assert after == before


def test_shuffle_reorders(engine: GameEngine, tiles: list[Tile]) -> None:
    orders = set()
    for _ in range(5):
        engine.shuffle_tiles()
        orders.add(tuple(t.word for t in engine.tiles()))
    assert len(orders) > 1


def test_deselect_all(engine: GameEngine) -> None:
    _select(engine, 0, 1, 2)
    assert len(engine.selected_tiles()) == 3
    engine.deselect_all()
    assert engine.selected_tiles() == []


def test_reset_game(engine: GameEngine, categories: list[Category]) -> None:
    words = sorted(t.word for t in engine.tiles())
    engine.process_match(categories[0])
    engine.process_mistake()
    _select(engine, 5)
    engine.use_hint()

    engine.reset_game()

    assert engine.score == 0
    assert engine.mistakes == 0
    assert engine.hints_used == 0
    assert not engine.is_over
    assert not engine.is_won
    assert engine.solved_categories() == []
    assert all(not t.selected and not t.matched for t in engine.tiles())
    assert sorted(t.word for t in engine.tiles()) == words


def test_reset_after_loss_allows_play(
    engine: GameEngine, categories: list[Category]
) -> None:
    for _ in range(MAX_MISTAKES):
        engine.process_mistake()
    engine.reset_game()
    engine.process_match(categories[3])
    assert engine.score == 250


def test_hint_and_shuffle_after_loss_do_nothing(engine: GameEngine) -> None:
    for _ in range(MAX_MISTAKES):
        engine.process_mistake()
    _select(engine, 4)
    order = [t.word for t in engine.tiles()]

    assert "over" in engine.use_hint()
    engine.shuffle_tiles()

    assert engine.score == 0
    assert engine.hints_used == 0
    assert [t.word for t in engine.tiles()] == order


def test_match_ignores_solved_and_foreign_categories(
    engine: GameEngine, categories: list[Category]
) -> None:
    for _ in range(4):
        engine.process_match(categories[0])
    engine.process_match(Category("Planets"))

    assert engine.score == 100
    assert engine.solved_categories() == [categories[0]]
    assert not engine.is_over
    assert len(engine.unmatched_tiles()) == 12
