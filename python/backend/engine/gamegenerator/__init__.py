from backend.engine.gamegenerator.generator import (
    GROUPS_COUNT,
    TILES_PER_GROUP,
    TOTAL_TILES,
    PuzzleGenerator,
)

__all__ = ["GROUPS_COUNT", "PuzzleGenerator", "TILES_PER_GROUP", "TOTAL_TILES"]
