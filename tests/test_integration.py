"""Whole games over the text protocol with every bot iteration."""

import io
import os
import sys
import unittest

from board.layout import standard_cells
from framework.replay import load_bots_from_directory, load_transcript
from framework.runner import run

BOTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "bots")
SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "scripts")


def board_text() -> str:
    cells = standard_cells()
    lines = [str(len(cells))]
    for index in sorted(cells):
        cell = cells[index]
        lines.append(
            f"{cell.index} {cell.richness} "
            + " ".join(str(n) for n in cell.neighbours)
        )
    return "\n".join(lines) + "\n"


def turn_text(day, sun, trees, actions) -> str:
    """One turn block; trees are (cell, size, mine, dormant) tuples."""
    lines = [str(day), "20", f"{sun} 0", "2 0 0", str(len(trees))]
    lines += [f"{c} {s} {int(m)} {int(d)}" for c, s, m, d in trees]
    lines.append(str(len(actions)))
    lines += actions
    return "\n".join(lines) + "\n"


# A short game from the usual start: two small trees each on the rim.
GAME = board_text() + "".join([
    turn_text(0, 2, [
        (22, 1, True, False), (31, 1, True, False),
        (25, 1, False, False), (34, 1, False, False),
    ], ["WAIT", "GROW 22", "GROW 31"]),
    turn_text(1, 3, [
        (22, 2, True, True), (31, 1, True, False),
        (25, 2, False, True), (34, 1, False, False),
    ], ["WAIT", "SEED 31 15", "SEED 31 32", "GROW 31"]),
    turn_text(2, 5, [
        (22, 2, True, False), (31, 1, True, False), (15, 0, True, False),
        (25, 2, False, False), (34, 2, False, False),
    ], [
        "WAIT", "GROW 22", "GROW 31", "GROW 15",
        "SEED 22 10", "SEED 22 9", "SEED 22 23", "SEED 31 32",
    ]),
    turn_text(3, 9, [
        (22, 3, True, True), (31, 1, True, False), (15, 0, True, False),
        (25, 3, False, True), (34, 2, False, False),
    ], ["WAIT", "GROW 31", "GROW 15", "SEED 31 32", "SEED 31 16"]),
    turn_text(4, 14, [
        (22, 3, True, False), (31, 2, True, False), (15, 1, True, False),
        (25, 3, False, False), (34, 2, False, False), (12, 0, False, False),
    ], [
        "WAIT", "COMPLETE 22", "GROW 31", "GROW 15",
        "SEED 22 3", "SEED 22 9", "SEED 31 16", "SEED 15 5",
    ]),
])


def matches(line, action):
    text = str(action)
    return line == text or line.startswith(text + " ")


class TestFullGame(unittest.TestCase):

    def setUp(self):
        self.transcript = load_transcript(io.StringIO(GAME))
        self.bots = load_bots_from_directory(BOTS_DIR)

    def test_every_bot_plays_every_turn_legally(self):
        for bot in self.bots:
            with self.subTest(bot=bot.name):
                out = io.StringIO()
                turns = run(bot, stdin=io.StringIO(GAME), stdout=out, timeout=None)
                self.assertEqual(turns, len(self.transcript))

                lines = out.getvalue().splitlines()
                self.assertEqual(len(lines), len(self.transcript))
                for line, state in zip(lines, self.transcript.turns):
                    self.assertTrue(
                        any(matches(line, a) for a in state.all_actions()),
                        f"day {state.day}: {line!r}",
                    )

    def test_no_fallbacks_needed(self):
        for bot in self.bots:
            with self.subTest(bot=bot.name):
                out = io.StringIO()
                run(bot, stdin=io.StringIO(GAME), stdout=out, timeout=None)
                for line in out.getvalue().splitlines():
                    self.assertNotIn("error", line)
                    self.assertNotIn("illegal", line)


class TestValidator(unittest.TestCase):

    def setUp(self):
        if SCRIPTS_DIR not in sys.path:
            sys.path.insert(0, SCRIPTS_DIR)
        import validate_bot
        self.validator = validate_bot

    def test_shipped_bots_pass(self):
        for filename in sorted(os.listdir(BOTS_DIR)):
            if not filename.endswith(".py"):
                continue
            with self.subTest(bot=filename):
                passed, results = self.validator.validate_bot(
                    os.path.join(BOTS_DIR, filename)
                )
                self.assertTrue(passed, "\n".join(str(r) for r in results))

    def test_missing_file_fails(self):
        passed, results = self.validator.validate_bot("no_such_bot.py")
        self.assertFalse(passed)
        self.assertIn("File not found", results[0].message)

    def test_sample_turns_are_all_phases(self):
        days = [state.day for state in self.validator.sample_turns()]
        self.assertEqual(days, [0, 9, 22, 23])


if __name__ == "__main__":
    unittest.main()
