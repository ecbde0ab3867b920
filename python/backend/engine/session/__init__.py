from backend.engine.session.session import GameSession

__all__ = ["GameSession"]
