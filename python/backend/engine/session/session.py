"""Host-side controller: turns user intents into engine calls and saves."""

from __future__ import annotations

import logging
from pathlib import Path

from backend.engine.gamegenerator import TILES_PER_GROUP
from backend.engine.gameplay import GameEngine
from backend.models.outcome import ValidationOutcome
from backend.persistence import JsonFileStore, PersistenceStore

logger = logging.getLogger(__name__)


class GameSession:
    """Mediates between a presentation layer, the engine and a store.

    The engine never touches the store; the session saves after every
    match, mistake and hint.  A failed save is logged and play goes on.
    """

    def __init__(self, engine: GameEngine, store: PersistenceStore) -> None:
        if engine is None:
            raise ValueError("Engine cannot be None.")
        if store is None:
            raise ValueError("Store cannot be None.")
        self.engine = engine
        self.store = store

    # -- selection ------------------------------------------------------------

    def toggle_tile(self, index: int) -> str | None:
        """Toggle the tile at board position *index*.

        Returns a message when the click is refused, otherwise ``None``.
        """
        if self.engine.is_over:
            return None
        tiles = self.engine.tiles()
        if not 0 <= index < len(tiles):
            return f"No tile at position {index}."

        tile = tiles[index]
        if tile.matched:
            return None
        if (
            not tile.selected
            and len(self.engine.selected_tiles()) >= TILES_PER_GROUP
        ):
            return f"Maximum {TILES_PER_GROUP} tiles can be selected!"

        tile.toggle()
        return None

    @property
    def ready_to_check(self) -> bool:
        return (
            not self.engine.is_over
            and len(self.engine.selected_tiles()) == TILES_PER_GROUP
        )

    def check_selection(self) -> ValidationOutcome:
        """Validate the selection and apply a match or a mistake."""
        outcome = self.engine.validate_selection()
        if self.engine.is_over:
            return outcome

        if outcome.valid:
            self.engine.process_match(outcome.category)
            self.save()
        elif len(self.engine.selected_tiles()) == TILES_PER_GROUP:
            self.engine.process_mistake()
            self.save()
        return outcome

    def deselect_all(self) -> None:
        self.engine.deselect_all()

    # -- board actions --------------------------------------------------------

    def shuffle(self) -> None:
        self.engine.shuffle_tiles()

    def use_hint(self) -> str:
        message = self.engine.use_hint()
        self.save()
        return message

    def new_game(self) -> None:
        """Restart the current puzzle and drop the saved game."""
        self.engine.reset_game()
        self.store.delete()

    # -- persistence ----------------------------------------------------------

    def save(self) -> bool:
        ok = self.store.save(self.engine)
        if not ok:
            logger.warning("Auto-save failed; continuing without a save.")
        return ok

    def load(self) -> bool:
        engine = self.store.load()
        if engine is None:
            return False
        self.engine = engine
        return True

    def export_game(self, path: Path) -> bool:
        return JsonFileStore.export_game(self.engine, path)

    def import_game(self, path: Path) -> bool:
        engine = JsonFileStore.import_game(path)
        if engine is None:
            return False
        self.engine = engine
        return True
