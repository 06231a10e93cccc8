"""Game session state shared by the command interpreter and the terminal loop."""

import logging
import random
from typing import List, Optional

from ..players.agent import choose_move_with_info
from ..players.strategy import nim_sum
from ..players.types import AgentConfig
from ..players.validator import validate_move
from .config import GameConfig, OPPONENT_CPU, OPPONENT_HUMAN
from .piles import PILE_COUNT, Move, Pile, format_piles

logger = logging.getLogger(__name__)

PHASE_AWAITING_OPPONENT = "awaiting_opponent"
PHASE_IN_TURN = "in_turn"
PHASE_GAME_OVER = "game_over"
PHASE_QUIT = "quit"

SOURCE_HUMAN = "human"
SOURCE_CPU = "cpu"


class GameSession:
    """One live match: three piles, whose turn it is, and who is playing.

    All effects go through ``console``, an object with ``write(text)`` and
    ``set_prompt(text)``. Callers are trusted: user input must be validated
    before ``take`` is called.
    """

    def __init__(self, console, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.console = console
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        self.piles = [Pile(rng=self.rng) for _ in range(PILE_COUNT)]
        self.player1_turn = True
        self.vs_cpu = self.config.vs_cpu
        self.player1_name = self.config.player1_name
        self.player2_name = self.config.player2_name
        self.cpu_name = self.config.cpu_name
        self.move_history: List[dict] = []

        self.quit = False
        self.in_match = False
        self.decide_turn()

    # --- Queries ---

    @property
    def current_player_name(self) -> str:
        return self.player1_name if self.player1_turn else self.player2_name

    @property
    def is_cpu_turn(self) -> bool:
        return self.vs_cpu and not self.player1_turn

    @property
    def phase(self) -> str:
        if self.quit:
            return PHASE_QUIT
        if self.game_over():
            return PHASE_GAME_OVER
        if self.in_match:
            return PHASE_IN_TURN
        return PHASE_AWAITING_OPPONENT

    def game_over(self) -> bool:
        return all(pile == 0 for pile in self.piles)

    def pile_counts(self) -> List[int]:
        return [int(pile) for pile in self.piles]

    # --- Turn sequencing ---

    def decide_turn(self):
        self.player1_turn = self.rng.random() < 0.5

    def switch_turn(self):
        self.player1_turn = not self.player1_turn

    def set_current_player_name(self, name: str):
        if self.player1_turn:
            self.player1_name = name
        else:
            self.player2_name = name

    def update_prompt(self):
        self.console.set_prompt(f"{self.current_player_name}> ")

    def show_piles(self):
        self.console.write(format_piles(self.piles))

    def randomize(self):
        for pile in self.piles:
            pile.randomize(self.rng)

    def start_turn(self):
        self.update_prompt()
        self.show_piles()
        logger.debug(
            "turn start: %s piles=%s nim_sum=%d",
            self.cpu_name if self.is_cpu_turn else self.current_player_name,
            self.pile_counts(),
            nim_sum(self.piles),
        )
        if self.is_cpu_turn:
            self.apply_agent_move()

    def next_turn(self):
        if self.game_over():
            if self.is_cpu_turn:
                self.console.write("  The CPU has won the game.")
            else:
                self.console.write(f"  Congratulations, {self.current_player_name}! You have won!")
            self.console.write("")
            logger.debug("match over after %d moves", len(self.move_history))
            self.in_match = False
            return

        self.switch_turn()
        self.start_turn()

    # --- Match lifecycle ---

    def start_match(self, opponent: str):
        self.vs_cpu = opponent == OPPONENT_CPU
        self.move_history = []
        self.in_match = True
        self.start_turn()

    def restart(self):
        self.randomize()
        self.decide_turn()
        self.move_history = []
        self.in_match = True
        self.start_turn()

    def end_match(self):
        self.in_match = False

    def request_quit(self):
        self.quit = True
        self.in_match = False

    # --- Moves ---

    def _apply_move(self, move: Move, source: str) -> dict:
        ok, error = validate_move(self.piles, move)
        if not ok:
            raise RuntimeError(f"Invalid {source} move {move!r}: {error}")

        player = self.cpu_name if source == SOURCE_CPU else self.current_player_name
        self.piles[move.pile].decrement_by(move.amount)
        entry = {
            "player": player,
            "player1_turn": self.player1_turn,
            "source": source,
            "move": move,
            "piles": self.pile_counts(),
        }
        self.move_history.append(entry)
        logger.debug("%s (%s) plays %s -> %s", player, source, move.to_notation(), entry["piles"])
        return entry

    def take(self, amount: int, pile_index: int) -> dict:
        entry = self._apply_move(Move(amount=amount, pile=pile_index), source=SOURCE_HUMAN)
        self.next_turn()
        return entry

    def apply_agent_move(self) -> dict:
        search_result = choose_move_with_info(self.piles, config=AgentConfig())
        move = search_result.move

        self.console.write(f"{self.cpu_name}> {move.to_notation()}")
        entry = self._apply_move(move, source=SOURCE_CPU)
        entry["search"] = search_result.as_dict()
        self.next_turn()
        return entry

    def state_json(self) -> dict:
        history = []
        for entry in self.move_history:
            history.append(
                {
                    "player": entry["player"],
                    "source": entry["source"],
                    "notation": entry["move"].to_notation(),
                    "piles": list(entry["piles"]),
                }
            )

        return {
            "piles": self.pile_counts(),
            "nim_sum": nim_sum(self.piles),
            "phase": self.phase,
            "opponent": OPPONENT_CPU if self.vs_cpu else OPPONENT_HUMAN,
            "player1_turn": self.player1_turn,
            "current_player": self.current_player_name,
            "names": {
                "player1": self.player1_name,
                "player2": self.player2_name,
                "cpu": self.cpu_name,
            },
            "history": history,
        }
