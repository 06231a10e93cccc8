"""CPU player implementations for Nim."""

from .agent import choose_move, choose_move_with_info
from .types import AgentConfig

__all__ = ["AgentConfig", "choose_move", "choose_move_with_info"]
