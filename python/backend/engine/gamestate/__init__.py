from backend.engine.gamestate.state import (
    HINT_PENALTY,
    MAX_MISTAKES,
    MISTAKE_PENALTY,
    GameState,
)

__all__ = ["GameState", "HINT_PENALTY", "MAX_MISTAKES", "MISTAKE_PENALTY"]
