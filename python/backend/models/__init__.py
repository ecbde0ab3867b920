from backend.models.category import Category, DifficultyTier
from backend.models.outcome import ValidationOutcome
from backend.models.tile import Tile

__all__ = ["Category", "DifficultyTier", "Tile", "ValidationOutcome"]
