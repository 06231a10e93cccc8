"""Console command registry and the interpreter that dispatches input lines."""

import logging
import re
from typing import Dict, List, Optional, Sequence

from .config import OPPONENT_CPU, normalize_opponent_tokens
from .errors import (
    ERR_SYNTAX,
    ArgumentError,
    CommandError,
    CommandSyntaxError,
    RangeError,
    format_error,
)
from .help import HELP_ME, HOW2PLAY, format_command_help
from .piles import PILE_COUNT
from .session import GameSession

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")

# ANSI foreground codes for the `color` command.
COLORS: Dict[str, str] = {
    "black": "\033[30m",
    "blue": "\033[34m",
    "green": "\033[32m",
    "cyan": "\033[36m",
    "red": "\033[31m",
    "magenta": "\033[35m",
    "brown": "\033[33m",
    "grey": "\033[37m",
    "darkgrey": "\033[90m",
    "lightblue": "\033[94m",
    "lightgreen": "\033[92m",
    "lightcyan": "\033[96m",
    "lightred": "\033[91m",
    "lightmagenta": "\033[95m",
    "yellow": "\033[93m",
    "white": "\033[97m",
}


def parse_int(text: str) -> Optional[int]:
    if not _INT_RE.match(text):
        return None
    return int(text)


def _require_int(text: str) -> int:
    value = parse_int(text)
    if value is None:
        raise ArgumentError(f"Could not parse '{text}' as an integer.")
    return value


def _require_pile(text: str) -> int:
    """Parse a 1-indexed pile argument and return its 0-based index."""
    pile = _require_int(text)
    if pile < 1 or pile > PILE_COUNT:
        raise RangeError(f"Expected <pile> in range [1, {PILE_COUNT}], got '{pile}'.")
    return pile - 1


class Command:
    name = ""
    syntax = ""
    description = ""

    def execute(self, session: GameSession, args: List[str]):
        raise NotImplementedError

    def help_text(self) -> str:
        return format_command_help(self.syntax, self.description)


class HelpCommand(Command):
    name = "help"
    syntax = "help [command_name]..."
    description = "Display the help screen (or the help for specified commands only)."

    def __init__(self, registry: Dict[str, Command]):
        self.registry = registry

    def execute(self, session, args):
        if not args:
            for name in sorted(self.registry):
                session.console.write(self.registry[name].help_text())
            return

        if len(args) == 1 and args[0].lower() == "me":
            session.console.write(HELP_ME)
            return

        for arg in args:
            name = arg.lower()
            command = self.registry.get(name)
            if command is None:
                session.console.write(format_error(ERR_SYNTAX, f"Command '{name}' not found."))
            else:
                session.console.write(command.help_text())


class ShowCommand(Command):
    name = "show"
    syntax = "show [pile]..."
    description = (
        "Show the piles (or the specified piles in the order of [pile], and valid pile "
        "is one of {1,2,3} corresponding to the pile number)"
    )

    def execute(self, session, args):
        if not args:
            session.show_piles()
            return

        # Nothing is written unless every argument is valid.
        counts = [str(int(session.piles[_require_pile(arg)])) for arg in args]
        session.console.write("  " + "  ".join(counts))


class TakeCommand(Command):
    name = "take"
    syntax = "[take] <number> [from] <pile>"
    description = "Take <number> of chips (in range [1, pile length]) from <pile>-th pile (in range [1, 3])."

    usage = "Type 'help take' for usage details."

    def execute(self, session, args):
        if not args:
            raise ArgumentError(f"Arguments <number> AND <pile> not found. {self.usage}")
        if len(args) == 1:
            raise ArgumentError(f"Argument <pile> not found. {self.usage}")

        has_from = args[1].lower() == "from"
        if len(args) >= 3 + int(has_from):
            raise ArgumentError(f"Too many arguments. {self.usage}")
        if has_from and len(args) == 2:
            raise ArgumentError(f"Argument <pile> not found. {self.usage}")

        number = _require_int(args[0])
        pile_index = _require_pile(args[2] if has_from else args[1])

        count = int(session.piles[pile_index])
        if count == 0:
            raise RangeError(f"Pile {pile_index + 1} is empty.")
        if number < 1 or number > count:
            raise RangeError(f"Expected <number> in range [1, pile length ({count})], got '{number}'.")

        session.take(number, pile_index)


class NameCommand(Command):
    name = "name"
    syntax = "name <name>"
    description = "Set your name to <name>. Special characters and spaces are allowed (case-sensitive)."

    def execute(self, session, args):
        if not args:
            raise ArgumentError("Argument <name> not found. Type 'help name' for usage details.")
        session.set_current_player_name(" ".join(args))
        session.update_prompt()


class How2PlayCommand(Command):
    name = "how2play"
    syntax = "how2play"
    description = "Print rules of the game and how to play NIM with this program."

    def execute(self, session, args):
        session.console.write(HOW2PLAY)


class RestartCommand(Command):
    name = "restart"
    syntax = "restart [cpu|human]"
    description = "Restart game with either CPU or human opponent."

    def execute(self, session, args):
        if not args:
            # Bare `restart` drops back to the opponent choice.
            session.console.write("")
            session.end_match()
            return

        try:
            opponent = normalize_opponent_tokens(args)
        except ValueError as exc:
            raise ArgumentError(str(exc)) from exc

        session.vs_cpu = opponent == OPPONENT_CPU
        session.console.write("----")
        session.restart()


class ExitCommand(Command):
    name = "exit"
    syntax = "exit"
    description = "Exit the entire program."

    def execute(self, session, args):
        session.request_quit()


class RageQuitCommand(ExitCommand):
    name = "rq"
    syntax = "rq"
    description = "Ragequit."


class ColorCommand(Command):
    name = "color"
    syntax = "color <color>"
    description = (
        "Sets the font color to <color> (one of {blue, green, cyan, red, magenta, brown, grey, "
        "darkgrey, lightblue, lightgreen, lightcyan, lightred, lightmagenta, yellow, white} "
        "(case-insensitive))."
    )

    usage = "Type 'help color' for usage details."

    def execute(self, session, args):
        if not args:
            raise ArgumentError(f"Argument <color> not found. {self.usage}")
        if len(args) > 1:
            raise ArgumentError(f"Too many arguments. {self.usage}")

        color_name = args[0].lower()
        code = COLORS.get(color_name)
        if code is None:
            raise ArgumentError(f"Could not find color named '{color_name}'. {self.usage}")
        session.console.set_color(code)


def build_registry() -> Dict[str, Command]:
    registry: Dict[str, Command] = {}
    commands = [
        HelpCommand(registry),
        ShowCommand(),
        TakeCommand(),
        NameCommand(),
        How2PlayCommand(),
        RestartCommand(),
        ExitCommand(),
        RageQuitCommand(),
        ColorCommand(),
    ]
    for command in commands:
        registry[command.name] = command
    return registry


class CommandInterpreter:
    def __init__(self, session: GameSession, registry: Optional[Dict[str, Command]] = None):
        self.session = session
        self.registry = registry or build_registry()

    def resolve(self, parts: Sequence[str]):
        """Map tokens to ``(command, args)``; a leading integer means `take`."""
        name = parts[0].lower()
        command = self.registry.get(name)
        if command is not None:
            return command, list(parts[1:])

        if parse_int(name) is not None:
            return self.registry["take"], list(parts)

        raise CommandSyntaxError(
            f"Command '{name}' not found. Type 'help' for list of available commands."
        )

    def execute(self, line: str) -> bool:
        """Run one input line. Returns False if it was rejected."""
        parts = line.split()
        if not parts:
            return True

        try:
            command, args = self.resolve(parts)
            command.execute(self.session, args)
        except CommandError as exc:
            logger.debug("rejected %r: %s", line, exc.message)
            self.session.console.write(exc.render())
            return False
        return True
