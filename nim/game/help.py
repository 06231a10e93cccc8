"""Static help text: command syntax, descriptions and the rules screen."""

import textwrap
from typing import List

CONSOLE_WIDTH = 80
DESCRIPTION_WIDTH = 50

HELP_ME = "  You're on your own buddy."

HOW2PLAY = """
  === NIM ===
  There are three piles of chips. Players take turns removing chips.
  On your turn you must take at least one chip, and you may only take
  chips from a single pile. Whoever takes the last chip wins.

  === Playing ===
  take 3 from 2    take 3 chips from pile 2
  take 3 2         same thing
  3 2              same thing
  show             show all piles (show 3 1 shows pile 3, then pile 1)
  name Bob         rename whoever's turn it is
  restart cpu      new game against the CPU (restart human for two players)
  exit             leave the program

  The CPU plays perfectly. If you want to beat it, look up "nim-sum".
"""


def word_wrap_fill(text: str, line_length: int) -> List[str]:
    """Wrap ``text`` into lines of exactly ``line_length`` (space padded)."""
    lines = textwrap.wrap(text, width=line_length, break_long_words=False, break_on_hyphens=False)
    return [line.ljust(line_length) for line in lines]


def format_command_help(syntax: str, description: str) -> str:
    """Syntax on the left, description wrapped into a right-aligned column.

    A syntax string too long to share a line with the description gets a
    line of its own.
    """
    head = f"  {syntax}"
    lines = word_wrap_fill(description, DESCRIPTION_WIDTH)
    column = CONSOLE_WIDTH - 1

    used = len(head) % CONSOLE_WIDTH
    out = [head]
    if used >= CONSOLE_WIDTH - DESCRIPTION_WIDTH - 1:
        used = 0
        out.append("\n")

    for line in lines:
        out.append(line.rjust(column - used))
        out.append("\n")
        used = 0
    return "".join(out)
