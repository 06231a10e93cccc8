import random
import unittest

from nim.game.commands import COLORS, CommandInterpreter, build_registry, parse_int
from nim.game.config import GameConfig
from nim.game.help import HELP_ME
from nim.game.session import GameSession

from .console import RecordingConsole


def make_interpreter(piles, player1_turn=True, vs_cpu=False):
    console = RecordingConsole()
    session = GameSession(console, config=GameConfig(), rng=random.Random(3))
    for pile, count in zip(session.piles, piles):
        pile.set(count)
    session.player1_turn = player1_turn
    session.vs_cpu = vs_cpu
    session.in_match = True
    return CommandInterpreter(session), session, console


class ResolutionTests(unittest.TestCase):
    def test_empty_line_is_a_no_op(self):
        interpreter, session, console = make_interpreter([5, 7, 9])
        self.assertTrue(interpreter.execute("   "))
        self.assertEqual(console.lines, [])

    def test_unknown_command(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        self.assertFalse(interpreter.execute("Dance now"))
        self.assertEqual(
            console.lines,
            ["> SyntaxError: Command 'dance' not found. Type 'help' for list of available commands."],
        )

    def test_command_names_are_case_insensitive(self):
        interpreter, session, _ = make_interpreter([5, 7, 9])
        self.assertTrue(interpreter.execute("TAKE 2 FROM 3"))
        self.assertEqual(session.pile_counts(), [5, 7, 7])

    def test_numeric_shorthand_is_take(self):
        interpreter, session, _ = make_interpreter([5, 7, 9])
        self.assertTrue(interpreter.execute("4 1"))
        self.assertEqual(session.pile_counts(), [1, 7, 9])

        self.assertTrue(interpreter.execute("2 from 2"))
        self.assertEqual(session.pile_counts(), [1, 5, 9])

    def test_numeric_shorthand_still_needs_a_pile(self):
        interpreter, session, console = make_interpreter([5, 7, 9])
        self.assertFalse(interpreter.execute("4"))
        self.assertEqual(
            console.lines,
            ["> ArgumentError: Argument <pile> not found. Type 'help take' for usage details."],
        )
        self.assertEqual(session.pile_counts(), [5, 7, 9])

    def test_parse_int(self):
        self.assertEqual(parse_int("12"), 12)
        self.assertEqual(parse_int("-3"), -3)
        self.assertIsNone(parse_int("1.5"))
        self.assertIsNone(parse_int("1_000"))
        self.assertIsNone(parse_int("x"))


class TakeCommandTests(unittest.TestCase):
    def assertRejected(self, line, message, piles=(5, 7, 9)):
        interpreter, session, console = make_interpreter(list(piles))
        self.assertFalse(interpreter.execute(line))
        self.assertEqual(console.lines, [message])
        self.assertEqual(session.pile_counts(), list(piles))
        self.assertTrue(session.player1_turn)

    def test_take_only_touches_one_pile(self):
        interpreter, session, _ = make_interpreter([5, 7, 9])
        interpreter.execute("take 3 2")
        self.assertEqual(session.pile_counts(), [5, 4, 9])
        self.assertFalse(session.player1_turn)

    def test_amount_above_pile_names_upper_bound(self):
        self.assertRejected(
            "take 10 from 1",
            "> RangeError: Expected <number> in range [1, pile length (5)], got '10'.",
        )

    def test_zero_amount(self):
        self.assertRejected(
            "take 0 1",
            "> RangeError: Expected <number> in range [1, pile length (5)], got '0'.",
        )

    def test_empty_pile(self):
        self.assertRejected("take 1 from 2", "> RangeError: Pile 2 is empty.", piles=(5, 0, 9))

    def test_pile_out_of_range(self):
        self.assertRejected("take 1 4", "> RangeError: Expected <pile> in range [1, 3], got '4'.")

    def test_unparseable_arguments(self):
        self.assertRejected("take x 1", "> ArgumentError: Could not parse 'x' as an integer.")
        self.assertRejected("take 1 from y", "> ArgumentError: Could not parse 'y' as an integer.")

    def test_arity(self):
        usage = " Type 'help take' for usage details."
        self.assertRejected("take", "> ArgumentError: Arguments <number> AND <pile> not found." + usage)
        self.assertRejected("take 1", "> ArgumentError: Argument <pile> not found." + usage)
        self.assertRejected("take 1 from", "> ArgumentError: Argument <pile> not found." + usage)
        self.assertRejected("take 1 2 3", "> ArgumentError: Too many arguments." + usage)
        self.assertRejected("take 1 from 2 3", "> ArgumentError: Too many arguments." + usage)

    def test_winning_take_ends_match(self):
        interpreter, session, console = make_interpreter([0, 0, 4])
        interpreter.execute("take 4 from 3")
        self.assertFalse(session.in_match)
        self.assertIn("  Congratulations, player1! You have won!", console.lines)


class ShowCommandTests(unittest.TestCase):
    def test_show_all(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("show")
        self.assertEqual(console.lines, ["  5  7  9"])

    def test_show_follows_argument_order(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("show 2 1")
        self.assertEqual(console.lines, ["  7  5"])

    def test_show_is_all_or_nothing(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("show 1 2 4")
        self.assertEqual(console.lines, ["> RangeError: Expected <pile> in range [1, 3], got '4'."])

        console.lines.clear()
        interpreter.execute("show 3 pile")
        self.assertEqual(console.lines, ["> ArgumentError: Could not parse 'pile' as an integer."])


class NameCommandTests(unittest.TestCase):
    def test_name_joins_words(self):
        interpreter, session, console = make_interpreter([5, 7, 9])
        interpreter.execute("name alice   bob")
        self.assertEqual(session.player1_name, "alice bob")
        self.assertEqual(console.prompt, "alice bob> ")

    def test_name_requires_argument(self):
        interpreter, session, console = make_interpreter([5, 7, 9])
        interpreter.execute("NAME")
        self.assertEqual(
            console.lines,
            ["> ArgumentError: Argument <name> not found. Type 'help name' for usage details."],
        )
        self.assertEqual(session.player1_name, "player1")


class HelpCommandTests(unittest.TestCase):
    def test_help_lists_every_command(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("help")
        for command in build_registry().values():
            self.assertIn(command.syntax, console.output)

    def test_help_for_one_command(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("help TAKE")
        self.assertTrue(console.lines[0].startswith("  [take] <number> [from] <pile>"))
        self.assertNotIn("show [pile]", console.output)

    def test_help_me(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("help me")
        self.assertEqual(console.lines, [HELP_ME])

    def test_help_unknown_keeps_going(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("help nope rq")
        self.assertEqual(console.lines[0], "> SyntaxError: Command 'nope' not found.")
        self.assertIn("Ragequit.", console.output)

    def test_help_lines_fit_console(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("help")
        for line in console.lines:
            self.assertLessEqual(len(line), 79)

    def test_how2play(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("how2play")
        self.assertIn("Whoever takes the last chip wins.", console.output)


class RestartAndExitTests(unittest.TestCase):
    def test_bare_restart_returns_to_opponent_choice(self):
        interpreter, session, _ = make_interpreter([5, 7, 9])
        interpreter.execute("restart")
        self.assertFalse(session.in_match)
        self.assertFalse(session.quit)
        self.assertEqual(session.pile_counts(), [5, 7, 9])

    def test_restart_with_opponent(self):
        interpreter, session, console = make_interpreter([0, 0, 1])
        interpreter.execute("restart CPU")
        self.assertTrue(session.vs_cpu)
        self.assertTrue(session.in_match)
        self.assertIn("----", console.lines)
        # whoever started, it is a human's turn when control returns
        self.assertTrue(session.player1_turn)
        self.assertNotEqual(session.pile_counts(), [0, 0, 1])

    def test_restart_rejects_bad_arguments(self):
        interpreter, session, console = make_interpreter([5, 7, 9])
        interpreter.execute("restart robot")
        interpreter.execute("restart cpu human")
        self.assertEqual(
            console.lines,
            [
                "> ArgumentError: Expected one of {cpu,human}. Got 'robot'.",
                "> ArgumentError: Expected only 1 argument, one of {cpu,human}.",
            ],
        )
        self.assertTrue(session.in_match)

    def test_exit_and_rq_quit(self):
        for word in ("exit", "RQ"):
            interpreter, session, _ = make_interpreter([5, 7, 9])
            interpreter.execute(word)
            self.assertTrue(session.quit)
            self.assertFalse(session.in_match)


class ColorCommandTests(unittest.TestCase):
    def test_color_sets_console_color(self):
        interpreter, session, console = make_interpreter([5, 7, 9])
        interpreter.execute("color LightBlue")
        self.assertEqual(console.color, COLORS["lightblue"])
        self.assertEqual(session.pile_counts(), [5, 7, 9])

    def test_color_errors(self):
        interpreter, _, console = make_interpreter([5, 7, 9])
        interpreter.execute("color")
        interpreter.execute("color red blue")
        interpreter.execute("color Puce")
        usage = " Type 'help color' for usage details."
        self.assertEqual(
            console.lines,
            [
                "> ArgumentError: Argument <color> not found." + usage,
                "> ArgumentError: Too many arguments." + usage,
                "> ArgumentError: Could not find color named 'puce'." + usage,
            ],
        )
        self.assertIsNone(console.color)


if __name__ == "__main__":
    unittest.main()
