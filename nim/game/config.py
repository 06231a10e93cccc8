"""Configuration helpers for opponent mode and player naming."""

from dataclasses import dataclass
from typing import Optional, Sequence

OPPONENT_CPU = "cpu"
OPPONENT_HUMAN = "human"

VALID_OPPONENTS = (OPPONENT_CPU, OPPONENT_HUMAN)
QUIT_WORDS = {"exit", "rq"}

DEFAULT_PLAYER1_NAME = "player1"
DEFAULT_PLAYER2_NAME = "player2"
DEFAULT_CPU_NAME = "cpu"


@dataclass(frozen=True)
class GameConfig:
    opponent: Optional[str] = None    # None = ask at startup
    player1_name: str = DEFAULT_PLAYER1_NAME
    player2_name: str = DEFAULT_PLAYER2_NAME
    cpu_name: str = DEFAULT_CPU_NAME
    use_default_color: bool = False

    @property
    def vs_cpu(self) -> bool:
        return self.opponent == OPPONENT_CPU


def normalize_opponent(value: object) -> str:
    opponent = str(value).strip().lower()
    if opponent not in VALID_OPPONENTS:
        raise ValueError(f"Expected one of {{cpu,human}}. Got '{opponent}'.")
    return opponent


def normalize_opponent_tokens(tokens: Sequence[str]) -> str:
    """Validate the argument list of an opponent choice (prompt or `restart`)."""
    if len(tokens) != 1:
        raise ValueError("Expected only 1 argument, one of {cpu,human}.")
    return normalize_opponent(tokens[0])


def normalize_name(value: object, name: str) -> str:
    text = " ".join(str(value).split())
    if not text:
        raise ValueError(f"{name} must not be empty.")
    return text
