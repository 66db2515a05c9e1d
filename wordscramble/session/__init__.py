from .core import GameSession

__all__ = ["GameSession"]
