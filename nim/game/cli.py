"""Nim terminal game loop with optional CPU opponent."""

import logging
import random
from typing import Optional

from .commands import COLORS, CommandInterpreter
from .config import GameConfig, QUIT_WORDS, normalize_opponent_tokens
from .errors import ERR_ARGUMENT, format_error
from .session import GameSession

logger = logging.getLogger(__name__)

RESET_COLOR = "\033[0m"


class TerminalConsole:
    """Line-oriented console: print for output, input() with a settable prompt."""

    def __init__(self, prompt: str = "player> "):
        self.prompt = prompt
        self.color: Optional[str] = None

    def write(self, text: str):
        print(text)

    def set_prompt(self, text: str):
        self.prompt = text

    def set_color(self, code: str):
        self.color = code
        print(code, end="", flush=True)

    def reset_color(self):
        if self.color is not None:
            print(RESET_COLOR, end="", flush=True)
            self.color = None

    def read_line(self, prompt: Optional[str] = None) -> Optional[str]:
        try:
            return input(self.prompt if prompt is None else prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None


class Game:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None, console=None):
        self.config = config or GameConfig()
        self.console = console or TerminalConsole()
        self.session = GameSession(self.console, config=self.config, rng=rng)
        self.interpreter = CommandInterpreter(self.session)

    def play(self) -> int:
        if not self.config.use_default_color:
            self.console.set_color(COLORS["white"])

        self.console.write(
            "  Welcome to the interactive NIM. Type 'how2play' for instructions and rules.\n"
            "  Type 'help' for detailed help."
        )

        opponent = self.config.opponent
        try:
            while not self.session.quit:
                if opponent is None:
                    opponent = self._choose_opponent()
                    if opponent is None:
                        break

                self.console.write("----")
                self.session.start_match(opponent)
                self._run_match()
                if self.session.quit:
                    break
                opponent = None

                self.session.randomize()
                self.session.decide_turn()
        finally:
            self.console.reset_color()

        logger.debug("leaving game loop")
        return 0

    def _run_match(self):
        while self.session.in_match:
            line = self.console.read_line()
            if line is None:
                self.session.request_quit()
                break
            self.interpreter.execute(line)

    def _choose_opponent(self) -> Optional[str]:
        """Ask for `cpu` or `human` until one is given. None means quit."""
        self.console.write("  Would you like to play against a CPU or a human? {cpu|human}")
        while True:
            line = self.console.read_line("> ")
            if line is None:
                self.session.request_quit()
                return None

            tokens = line.split()
            if not tokens:
                continue
            if tokens[0].lower() in QUIT_WORDS:
                self.session.request_quit()
                return None

            try:
                return normalize_opponent_tokens(tokens)
            except ValueError as exc:
                self.console.write(format_error(ERR_ARGUMENT, str(exc)))
