"""Move validation helpers shared by humans and the CPU player."""

from typing import Optional, Sequence, Tuple

from ..game.piles import Move


def validate_move(piles: Sequence[int], move: Optional[Move]) -> Tuple[bool, Optional[str]]:
    if move is None:
        return False, "Move is missing."
    if not 0 <= move.pile < len(piles):
        return False, f"Expected <pile> in range [1, {len(piles)}], got '{move.pile + 1}'."

    count = int(piles[move.pile])
    if count == 0:
        return False, f"Pile {move.pile + 1} is empty."
    if not 1 <= move.amount <= count:
        return False, f"Expected <number> in range [1, pile length ({count})], got '{move.amount}'."
    return True, None
