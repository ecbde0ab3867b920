"""Core gameplay logic: selection, validation, scoring and end detection."""

from __future__ import annotations

import logging
import random
from typing import Any

from backend.engine.gamegenerator import (
    GROUPS_COUNT,
    TILES_PER_GROUP,
    PuzzleGenerator,
)
from backend.engine.gamestate import MAX_MISTAKES, GameState
from backend.errors import SnapshotError
from backend.models.category import Category, DifficultyTier
from backend.models.outcome import ValidationOutcome
from backend.models.tile import Tile

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class GameEngine:
    """Orchestrates a single game session over 16 tiles and 4 categories.

    Constructed without arguments it plays the built-in puzzle.  Custom
    tiles and categories that do not form a 4×4 partition are replaced by
    the built-in puzzle; use :meth:`from_puzzle` to get an error instead.
    """

    def __init__(
        self,
        tiles: list[Tile] | None = None,
        categories: list[Category] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self.state = GameState()

        if tiles is None and categories is None:
            self._use_default()
        elif PuzzleGenerator.is_valid_setup(tiles, categories):
            self._tiles = list(tiles)
            self._categories = list(categories)
        else:
            logger.warning(
                "Invalid puzzle setup; falling back to the default puzzle."
            )
            self._use_default()

    @classmethod
    def from_puzzle(
        cls,
        tiles: list[Tile],
        categories: list[Category],
        rng: random.Random | None = None,
    ) -> "GameEngine":
        """Create a session from custom data, raising on an invalid partition."""
        PuzzleGenerator.validate_setup(tiles, categories)
        return cls(tiles, categories, rng=rng)

    def _use_default(self) -> None:
        self._tiles, self._categories = PuzzleGenerator.default_puzzle()
        self.shuffle_tiles()

    # -- selection & validation -----------------------------------------------

    def selected_tiles(self) -> list[Tile]:
        return [tile for tile in self._tiles if tile.selected]

    def validate_selection(self) -> ValidationOutcome:
        """Check whether the current selection is one complete category."""
        selected = self.selected_tiles()
        if len(selected) != TILES_PER_GROUP:
            return ValidationOutcome(
                False, f"Select exactly {TILES_PER_GROUP} tiles", None
            )

        pivot = selected[0].category
        for tile in selected:
            if tile.category != pivot:
                return ValidationOutcome(False, "Not all tiles match!", None)

        return ValidationOutcome(True, "Correct!", pivot)

    # -- state transitions ----------------------------------------------------

    def process_match(self, category: Category) -> None:
        """Mark *category* solved: match its tiles and award its points."""
        if (
            self.state.game_over
            or category in self.state.solved
            or category not in self._categories
        ):
            return
        for tile in self._tiles:
            if tile.category == category:
                tile.mark_matched()
        self.state.record_solved(category, GROUPS_COUNT)
        logger.debug("Matched %s, score %d", category.name, self.state.score)

    def process_mistake(self) -> None:
        """Charge a wrong guess: lose a life, pay the penalty, clear the board."""
        if self.state.game_over:
            return
        self.state.record_mistake()
        self.deselect_all()
        logger.debug(
            "Mistake %d/%d, score %d",
            self.state.mistakes, MAX_MISTAKES, self.state.score,
        )

    def use_hint(self) -> str:
        """Reveal the category of the first selected tile, at a cost."""
        if self.state.game_over:
            return "The game is over."
        selected = self.selected_tiles()
        if not selected:
            return "Select at least one tile to get a hint!"

        self.state.record_hint()
        tile = selected[0]
        return f'"{tile.word}" belongs to: {tile.category.name}'

    def shuffle_tiles(self) -> None:
        if self.state.game_over:
            return
        PuzzleGenerator.shuffle(self._tiles, self._rng)

    def deselect_all(self) -> None:
        for tile in self._tiles:
            tile.select(False)

    def reset_game(self) -> None:
        """Restart the same puzzle: wipe counters and flags, reshuffle."""
        self.state.clear()
        for tile in self._tiles:
            tile.reset()
        self.shuffle_tiles()

    # -- queries --------------------------------------------------------------

    def tiles(self) -> list[Tile]:
        return list(self._tiles)

    def categories(self) -> list[Category]:
        return list(self._categories)

    def unmatched_tiles(self) -> list[Tile]:
        return [tile for tile in self._tiles if not tile.matched]

    def solved_categories(self) -> list[Category]:
        return list(self.state.solved)

    def remaining_lives(self) -> int:
        return self.state.remaining_lives

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def mistakes(self) -> int:
        return self.state.mistakes

    @property
    def hints_used(self) -> int:
        return self.state.hints_used

    @property
    def is_over(self) -> bool:
        return self.state.game_over

    @property
    def is_won(self) -> bool:
        return self.state.game_won

    # -- snapshots ------------------------------------------------------------

    def to_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serialisable copy of the whole session."""
        return {
            "version": SNAPSHOT_VERSION,
            "categories": [
                {
                    "name": c.name,
                    "description": c.description,
                    "difficulty": c.difficulty.name,
                    "color": c.color,
                }
                for c in self._categories
            ],
            "tiles": [
                {
                    "word": t.word,
                    "category": t.category.name,
                    "selected": t.selected,
                    "matched": t.matched,
                }
                for t in self._tiles
            ],
            "score": self.state.score,
            "mistakes": self.state.mistakes,
            "hints_used": self.state.hints_used,
            "solved_categories": [c.name for c in self.state.solved],
            "game_over": self.state.game_over,
            "game_won": self.state.game_won,
        }

    @classmethod
    def from_snapshot(
        cls, data: dict[str, Any], rng: random.Random | None = None
    ) -> "GameEngine":
        """Rebuild a session from :meth:`to_snapshot` output.

        Raises:
            SnapshotError: the snapshot is malformed or inconsistent.
        """
        try:
            if data.get("version") != SNAPSHOT_VERSION:
                raise SnapshotError(
                    f"Unsupported snapshot version {data.get('version')!r}."
                )
            by_name: dict[str, Category] = {}
            for entry in data["categories"]:
                category = Category(
                    name=entry["name"],
                    description=entry.get("description", ""),
                    difficulty=DifficultyTier[entry["difficulty"]],
                    color=entry.get("color", "grey"),
                )
                by_name[category.name] = category
            categories = list(by_name.values())

            tiles: list[Tile] = []
            for entry in data["tiles"]:
                tile = Tile(entry["word"], by_name[entry["category"]])
                if entry.get("matched"):
                    tile.mark_matched()
                elif entry.get("selected"):
                    tile.select(True)
                tiles.append(tile)

            engine = cls.from_puzzle(tiles, categories, rng=rng)

            state = engine.state
            state.score = int(data["score"])
            state.mistakes = int(data["mistakes"])
            state.hints_used = int(data["hints_used"])
            state.solved = [by_name[name] for name in data["solved_categories"]]
            state.game_over = bool(data["game_over"])
            state.game_won = bool(data["game_won"])
        except SnapshotError:
            raise
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc}") from exc

        engine._check_consistency()
        return engine

    def _check_consistency(self) -> None:
        """Raise :class:`SnapshotError` unless counters, flags and tiles agree."""
        state = self.state
        if (
            state.score < 0
            or state.hints_used < 0
            or not 0 <= state.mistakes <= MAX_MISTAKES
        ):
            raise SnapshotError("Snapshot counters are out of range.")

        solved_names = [c.name for c in state.solved]
        if len(set(solved_names)) != len(solved_names):
            raise SnapshotError("Snapshot lists a solved category twice.")

        matched = {id(t) for t in self._tiles if t.matched}
        expected = {id(t) for t in self._tiles if t.category in state.solved}
        if matched != expected:
            raise SnapshotError(
                "Matched tiles do not match the solved categories."
            )

        all_solved = len(state.solved) == GROUPS_COUNT
        out_of_lives = state.mistakes == MAX_MISTAKES
        if state.game_over != (all_solved or out_of_lives):
            raise SnapshotError("Snapshot game-over flag is inconsistent.")
        if state.game_won != all_solved:
            raise SnapshotError("Snapshot game-won flag is inconsistent.")
