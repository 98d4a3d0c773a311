"""Tests for the offline replay and comparison tools."""

import io
import os
import tempfile
import unittest

from board.actions import Action, ActionType
from board.layout import standard_cells
from board.protocol import ProtocolError
from framework.bot_interface import Bot
from framework.replay import (
    ReplayResult,
    compare,
    find_bot,
    format_agreement,
    format_decisions,
    format_summary,
    load_bots_from_directory,
    load_transcript,
    replay,
)
from bots.basic_bot import BasicBot
from bots.sun_bot import SunBot

BOTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "bots")


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


def turn_text(day: int, trees, actions) -> str:
    lines = [str(day), "20", "5 0", "3 0 0", str(len(trees))]
    lines += [f"{c} {s} {int(m)} 0" for c, s, m in trees]
    lines.append(str(len(actions)))
    lines += actions
    return "\n".join(lines) + "\n"


TRANSCRIPT = (
    board_text()
    + turn_text(0, [(0, 1, True)], ["WAIT", "GROW 0"])
    + turn_text(1, [(0, 2, True)], ["WAIT", "SEED 0 1", "SEED 0 7"])
    + turn_text(2, [(0, 2, True), (7, 0, True)], ["WAIT"])
)


# --- Helper bots ---

class CrashBot(Bot):
    @property
    def name(self):
        return "CrashBot"

    def decide(self, state):
        raise RuntimeError("I crashed!")


class IllegalBot(Bot):
    def decide(self, state):
        return Action.complete(0)


class TestTranscript(unittest.TestCase):

    def test_load_from_stream(self):
        transcript = load_transcript(io.StringIO(TRANSCRIPT))
        self.assertEqual(len(transcript.cells), 37)
        self.assertEqual(len(transcript), 3)
        self.assertEqual([t.day for t in transcript.turns], [0, 1, 2])

    def test_load_from_path(self):
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False) as f:
            f.write(TRANSCRIPT)
            path = f.name
        try:
            self.assertEqual(len(load_transcript(path)), 3)
        finally:
            os.remove(path)

    def test_malformed(self):
        with self.assertRaises(ProtocolError):
            load_transcript(io.StringIO(board_text() + "0\n20\n5 0\n3 0 0\nmany\n"))


class TestReplay(unittest.TestCase):

    def setUp(self):
        self.transcript = load_transcript(io.StringIO(TRANSCRIPT))

    def test_one_decision_per_turn(self):
        result = replay(BasicBot(), self.transcript)
        self.assertEqual(result.bot_name, "BasicBot")
        self.assertEqual(len(result.decisions), 3)
        self.assertEqual(result.decisions[0], Action.grow(0))
        self.assertEqual(result.decisions[2], Action.wait())
        self.assertEqual(result.errors, [])

    def test_errors_count_as_wait(self):
        result = replay(CrashBot(), self.transcript)
        self.assertEqual(len(result.errors), 3)
        self.assertIn("RuntimeError", result.errors[0])
        self.assertEqual(result.count(ActionType.WAIT), 3)

    def test_illegal_moves_recorded(self):
        result = replay(IllegalBot(), self.transcript)
        self.assertEqual(len(result.errors), 3)
        self.assertIn("illegal", result.errors[0])

    def test_compare(self):
        results = compare([BasicBot(), SunBot()], self.transcript)
        self.assertEqual([r.bot_name for r in results], ["BasicBot", "SunBot"])

    def test_compare_rejects_duplicate_names(self):
        with self.assertRaises(ValueError):
            compare([BasicBot(), BasicBot()], self.transcript)

    def test_agreement(self):
        a = ReplayResult("A")
        b = ReplayResult("B")
        for action in (Action.wait(), Action.grow(1)):
            a.record_decision(action)
        for action in (Action.wait(), Action.grow(2)):
            b.record_decision(action)
        self.assertAlmostEqual(a.agreement(b), 0.5)
        self.assertEqual(ReplayResult("C").agreement(a), 0.0)


class TestFormatting(unittest.TestCase):

    def setUp(self):
        self.transcript = load_transcript(io.StringIO(TRANSCRIPT))
        self.results = compare([BasicBot(), CrashBot()], self.transcript)

    def test_decisions_table(self):
        table = format_decisions(self.transcript, self.results)
        self.assertIn("BasicBot", table)
        self.assertIn("CrashBot", table)
        self.assertIn("GROW 0", table)
        # Turn 0 differs between the bots, the last turn does not
        rows = table.splitlines()[3:]
        self.assertTrue(rows[0].endswith("*"))
        self.assertFalse(rows[-1].endswith("*"))

    def test_summary_table(self):
        summary = format_summary(self.results)
        self.assertIn("REPLAY SUMMARY", summary)
        crash_row = [l for l in summary.splitlines() if l.startswith("CrashBot")][0]
        self.assertTrue(crash_row.rstrip().endswith("3"))

    def test_agreement_table(self):
        table = format_agreement(self.results)
        self.assertIn("AGREEMENT", table)
        basic_row = [l for l in table.splitlines() if l.startswith("BasicBot")][0]
        # Same bot agrees with itself; the crashing bot only matches on WAIT
        self.assertEqual(basic_row.split()[1:], ["100", "33"])


class TestLoadBots(unittest.TestCase):

    def test_loader_warns_about_running_bot_code(self):
        self.assertIn("Security warning", load_bots_from_directory.__doc__)

    def test_loads_every_iteration(self):
        names = [b.name for b in load_bots_from_directory(BOTS_DIR)]
        for expected in ("BasicBot", "RichnessBot", "ShadowBot", "SunBot", "RandomBot"):
            self.assertIn(expected, names)
        self.assertEqual(len(set(names)), len(names))

    def test_find_bot_ignores_case(self):
        bots = [BasicBot(), SunBot()]
        bot, names = find_bot(bots, "sunbot")
        self.assertIsInstance(bot, SunBot)
        self.assertEqual(names, ["BasicBot", "SunBot"])

    def test_find_unknown_bot(self):
        bot, _ = find_bot([BasicBot()], "Nope")
        self.assertIsNone(bot)


if __name__ == "__main__":
    unittest.main()
