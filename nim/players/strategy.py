"""Optimal Nim play via bit parity (the nim-sum).

A position whose pile counts XOR to zero is lost for the player to move under
normal play. From any other position there is a move back to nim-sum zero:
take the highest bit where an odd number of piles have a one, pick the first
pile that has that bit set, and flip every odd-parity bit in that pile.
"""

from dataclasses import dataclass
import logging
from typing import Dict, List, Optional, Sequence

from ..game.piles import Move
from .types import AgentConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    move: Optional[Move]
    nim_sum: int
    parity: List[int]
    winning: bool

    def as_dict(self) -> Dict[str, object]:
        if self.move is None:
            notation = None
        else:
            notation = self.move.to_notation()

        return {
            "notation": notation,
            "nim_sum": self.nim_sum,
            "parity": "".join(str(bit) for bit in self.parity),
            "winning": self.winning,
        }


def nim_sum(piles: Sequence[int]) -> int:
    result = 0
    for count in piles:
        result ^= int(count)
    return result


def parity_bits(piles: Sequence[int], width: int) -> List[int]:
    """Parity of each bit across all piles, most significant bit first."""
    bits = []
    for i in range(width - 1, -1, -1):
        ones = sum((int(count) >> i) & 1 for count in piles)
        bits.append(ones & 1)
    return bits


def _bits_to_int(bits: List[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def _largest_pile(piles: Sequence[int]) -> int:
    max_index = 0
    for j in range(1, len(piles)):
        if int(piles[j]) > int(piles[max_index]):
            max_index = j
    return max_index


def _winning_move(piles: Sequence[int], parity: List[int], width: int) -> Optional[Move]:
    target_mask = _bits_to_int(parity)
    for offset, bit in enumerate(parity):
        if not bit:
            continue

        i = width - 1 - offset
        for j, count in enumerate(piles):
            count = int(count)
            if (count >> i) & 1:
                target = count ^ target_mask
                return Move(amount=count - target, pile=j)
        break
    return None


def search_best_move(piles: Sequence[int], config: Optional[AgentConfig] = None) -> SearchResult:
    resolved_config = config or AgentConfig()
    width = resolved_config.bit_width

    parity = parity_bits(piles, width)
    move = _winning_move(piles, parity, width)
    winning = move is not None

    if move is None and any(int(count) > 0 for count in piles):
        move = Move(amount=resolved_config.fallback_amount, pile=_largest_pile(piles))

    result = SearchResult(
        move=move,
        nim_sum=_bits_to_int(parity),
        parity=parity,
        winning=winning,
    )
    logger.debug("search piles=%s -> %s", [int(count) for count in piles], result.as_dict())
    return result
