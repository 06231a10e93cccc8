"""Game runtime package for Nim."""

from .config import (
    OPPONENT_CPU,
    OPPONENT_HUMAN,
    GameConfig,
)

__all__ = [
    "GameConfig",
    "OPPONENT_CPU",
    "OPPONENT_HUMAN",
    "Game",
]


def __getattr__(name):
    if name == "Game":
        from .cli import Game

        return Game
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
