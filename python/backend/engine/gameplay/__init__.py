from backend.engine.gameplay.game import SNAPSHOT_VERSION, GameEngine

__all__ = ["GameEngine", "SNAPSHOT_VERSION"]
