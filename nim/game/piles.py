"""
Nim pile representation.

Three piles, addressed 1-indexed by the player and 0-indexed internally:

    pile:     1   2   3
    count:   14  11  17

A pile is created with a random count in [MIN_PILE, MAX_PILE) and only ever
shrinks during a match.
"""

import math
import random
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

# --- Constants ---

MIN_PILE = 10
MAX_PILE = 20
PILE_COUNT = 3

# Enough bits to hold any count in [0, MAX_PILE].
BIT_WIDTH = max(1, math.ceil(math.log2(MAX_PILE + 1)))


class PileInvariantError(AssertionError):
    """A pile was pushed outside [0, MAX_PILE]. Signals a bug, not bad input."""


# --- Move ---

@dataclass(frozen=True)
class Move:
    amount: int   # objects removed
    pile: int     # 0-based pile index

    def to_notation(self) -> str:
        return f"take {self.amount} from {self.pile + 1}"

    def __repr__(self):
        return self.to_notation()


# --- Pile ---

@total_ordering
class Pile:
    def __init__(self, count: Optional[int] = None, rng: Optional[random.Random] = None):
        self._count = 0
        if count is None:
            self.randomize(rng)
        else:
            self.set(count)

    @property
    def count(self) -> int:
        return self._count

    def set(self, count: int):
        self._check(count)
        self._count = count

    def decrement_by(self, amount: int):
        self._check(self._count - amount)
        self._count -= amount

    def increment_by(self, amount: int):
        self._check(self._count + amount)
        self._count += amount

    def randomize(self, rng: Optional[random.Random] = None):
        source = rng or random
        self._count = source.randrange(MIN_PILE, MAX_PILE)

    @staticmethod
    def _check(count: int):
        if count < 0 or count > MAX_PILE:
            raise PileInvariantError(f"Pile count {count} outside [0, {MAX_PILE}].")

    def __int__(self):
        return self._count

    def __index__(self):
        return self._count

    def __eq__(self, other):
        if isinstance(other, Pile):
            return self._count == other._count
        if isinstance(other, int):
            return self._count == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Pile):
            return self._count < other._count
        if isinstance(other, int):
            return self._count < other
        return NotImplemented

    def __hash__(self):
        return hash(self._count)

    def __str__(self):
        return str(self._count)

    def __repr__(self):
        return f"Pile({self._count})"


def format_piles(piles) -> str:
    return "  " + "  ".join(str(int(pile)) for pile in piles)
