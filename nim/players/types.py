"""Types used by bot players."""

from dataclasses import dataclass

from ..game.piles import BIT_WIDTH


@dataclass(frozen=True)
class AgentConfig:
    bit_width: int = BIT_WIDTH
    fallback_amount: int = 1
