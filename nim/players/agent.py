"""Public interface for choosing CPU moves."""

from typing import Optional, Sequence

from ..game.piles import Move
from .strategy import SearchResult, search_best_move
from .types import AgentConfig


def choose_move(piles: Sequence[int], config: Optional[AgentConfig] = None) -> Optional[Move]:
    result = search_best_move(piles, config=config)
    return result.move


def choose_move_with_info(piles: Sequence[int], config: Optional[AgentConfig] = None) -> SearchResult:
    return search_best_move(piles, config=config)
