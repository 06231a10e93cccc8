#!/usr/bin/env python3
"""CLI entry point for Nim."""

import argparse
import logging
import random
import sys
from typing import List, Optional

from ..players.agent import choose_move_with_info
from .cli import Game
from .config import (
    DEFAULT_CPU_NAME,
    DEFAULT_PLAYER1_NAME,
    DEFAULT_PLAYER2_NAME,
    OPPONENT_CPU,
    OPPONENT_HUMAN,
    GameConfig,
    normalize_name,
)
from .piles import BIT_WIDTH, MAX_PILE, PILE_COUNT, format_piles


def _print_analysis(piles: List[int]):
    result = choose_move_with_info(piles)
    print(f"=== Position {format_piles(piles).strip()} ===")
    for count in piles:
        print(f"  {count:>2} = {count:0{BIT_WIDTH}b}")
    print(f"  parity  {''.join(str(bit) for bit in result.parity)}")
    print(f"  nim-sum {result.nim_sum}")

    if result.move is None:
        print("  No objects left. The previous player has won.")
        return

    position = "winning" if result.winning else "losing"
    print(f"  {position.capitalize()} position for the player to move.")
    print(f"  CPU plays: {result.move.to_notation()}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Nim in the terminal.")
    parser.add_argument(
        "--opponent",
        default=None,
        choices=[OPPONENT_CPU, OPPONENT_HUMAN],
        help="Opponent for the first game (asked interactively if omitted).",
    )
    parser.add_argument("--player1", default=DEFAULT_PLAYER1_NAME, help="Name of player 1.")
    parser.add_argument("--player2", default=DEFAULT_PLAYER2_NAME, help="Name of player 2.")
    parser.add_argument("--cpu-name", default=DEFAULT_CPU_NAME, help="Name shown for CPU moves.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (defaults to the clock).")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Keep the terminal's default font color.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics written to stderr.",
    )
    parser.add_argument(
        "--analyze",
        type=int,
        nargs=PILE_COUNT,
        metavar="PILE",
        help="Print nim-sum analysis and the CPU move for a position, then exit.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.analyze is not None:
        if any(count < 0 or count > MAX_PILE for count in args.analyze):
            parser.error(f"--analyze piles must be between 0 and {MAX_PILE}")
        _print_analysis(args.analyze)
        return 0

    try:
        config = GameConfig(
            opponent=args.opponent,
            player1_name=normalize_name(args.player1, "--player1"),
            player2_name=normalize_name(args.player2, "--player2"),
            cpu_name=normalize_name(args.cpu_name, "--cpu-name"),
            use_default_color=args.no_color,
        )
    except ValueError as exc:
        parser.error(str(exc))

    game = Game(config=config, rng=random.Random(args.seed))
    return game.play()


if __name__ == "__main__":
    sys.exit(main())
