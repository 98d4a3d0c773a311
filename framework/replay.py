"""Replay recorded judge input through several bots.

A transcript is exactly what a bot reads on stdin during a game: the board
block followed by one block per turn. Replaying it does not simulate the
game; every bot sees the same recorded turns, which makes it easy to see
where two iterations disagree.
"""

import importlib
import inspect
import os
import sys
from typing import Dict, List, Optional, TextIO, Tuple

from board.actions import Action, ActionType
from board.cell import Cell
from board.protocol import LineReader, read_cells, read_turn
from board.state import GameState
from framework.bot_interface import Bot


class Transcript:
    """A recorded game: the board and the turns as the judge sent them."""

    def __init__(self, cells: Dict[int, Cell], turns: List[GameState]):
        self.cells = cells
        self.turns = turns

    def __len__(self) -> int:
        return len(self.turns)


class ReplayResult:
    """The moves one bot made over a transcript."""

    def __init__(self, bot_name: str):
        self.bot_name = bot_name
        self.decisions: List[Action] = []
        self.errors: List[str] = []

    def record_decision(self, action: Action) -> None:
        self.decisions.append(action)

    def record_error(self, error_msg: str) -> None:
        """Record a bot error."""
        self.errors.append(error_msg)

    def count(self, action_type: ActionType) -> int:
        return sum(1 for a in self.decisions if a.type == action_type)

    def agreement(self, other: "ReplayResult") -> float:
        """Fraction of turns on which both bots made the same move."""
        pairs = list(zip(self.decisions, other.decisions))
        if not pairs:
            return 0.0
        return sum(1 for a, b in pairs if a == b) / len(pairs)

    def __repr__(self) -> str:
        return (
            f"ReplayResult({self.bot_name}: {len(self.decisions)} turns, "
            f"{len(self.errors)} errors)"
        )


def load_transcript(source) -> Transcript:
    """Read a transcript from a path or an open text stream.

    Raises:
        ProtocolError: If the transcript is malformed.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source) as f:
            return _read_transcript(f)
    return _read_transcript(source)


def _read_transcript(stream: TextIO) -> Transcript:
    reader = LineReader(stream)
    cells = read_cells(reader)
    turns = []
    while True:
        try:
            turns.append(read_turn(reader, cells))
        except EOFError:
            break
    return Transcript(cells, turns)


def replay(bot: Bot, transcript: Transcript) -> ReplayResult:
    """Run one bot over every recorded turn.

    Bot errors and illegal moves are recorded and count as WAIT.
    """
    result = ReplayResult(bot.name)
    bot.on_game_start(transcript.cells)

    for state in transcript.turns:
        try:
            action = bot.decide(state)
            if not isinstance(action, Action):
                raise TypeError(
                    f"decide() must return an Action, "
                    f"got {type(action).__name__}"
                )
            if not state.is_legal(action):
                raise ValueError(f"illegal move {action}")
        except Exception as e:
            result.record_error(f"Day {state.day}: {type(e).__name__}: {e}")
            action = Action.wait()

        result.record_decision(action)
        bot.on_turn_end(state, action)

    return result


def compare(bots: List[Bot], transcript: Transcript) -> List[ReplayResult]:
    """Replay the transcript through each bot in turn."""
    names = [b.name for b in bots]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate bot names found: {names}")
    return [replay(bot, transcript) for bot in bots]


def format_decisions(transcript: Transcript, results: List[ReplayResult]) -> str:
    """Format the move each bot made on each turn as a table."""
    width = max([14] + [len(r.bot_name) + 2 for r in results])
    lines = []
    lines.append("")
    header = f"{'Day':<5}{'Sun':>5}  " + "".join(
        f"{r.bot_name:<{width}}" for r in results
    )
    lines.append(header)
    lines.append("-" * len(header))

    for turn, state in enumerate(transcript.turns):
        row = f"{state.day:<5}{state.sun:>5}  "
        moves = [str(r.decisions[turn]) for r in results]
        row += "".join(f"{m:<{width}}" for m in moves)
        if len(set(moves)) > 1:
            row += " *"
        lines.append(row.rstrip())

    return "\n".join(lines)


def format_summary(results: List[ReplayResult]) -> str:
    """Format per-bot move counts as a readable table."""
    lines = []
    lines.append("")
    lines.append("=" * 62)
    lines.append("REPLAY SUMMARY")
    lines.append("=" * 62)
    lines.append(
        f"{'Bot':<20}{'Turns':>7}{'Wait':>7}{'Seed':>7}"
        f"{'Grow':>7}{'Cmpl':>7}{'Errs':>7}"
    )
    lines.append("-" * 62)

    for r in results:
        lines.append(
            f"{r.bot_name:<20}{len(r.decisions):>7}"
            f"{r.count(ActionType.WAIT):>7}{r.count(ActionType.SEED):>7}"
            f"{r.count(ActionType.GROW):>7}{r.count(ActionType.COMPLETE):>7}"
            f"{len(r.errors):>7}"
        )

    lines.append("=" * 62)
    return "\n".join(lines)


def format_agreement(results: List[ReplayResult]) -> str:
    """Format how often each pair of bots made the same move, in percent."""
    width = max([8] + [len(r.bot_name) + 2 for r in results])
    lines = []
    lines.append("")
    lines.append("AGREEMENT (% of turns with the same move)")
    lines.append(
        " " * 20 + "".join(f"{r.bot_name:>{width}}" for r in results)
    )
    for row in results:
        cells = "".join(
            f"{row.agreement(col) * 100:>{width}.0f}" for col in results
        )
        lines.append(f"{row.bot_name:<20}{cells}")
    return "\n".join(lines)


def load_bots_from_directory(
    directory: str = "bots",
    exclude: Optional[List[str]] = None,
) -> List[Bot]:
    """Discover and load all Bot subclasses from a directory.

    Scans Python files in the directory for classes that subclass Bot
    and instantiates them.

    **Security warning**: Bot files are imported and their top-level code
    runs with full process privileges. Only load bot files you trust, and
    run ``scripts/validate_bot.py`` on a new iteration first.

    Args:
        directory: Path to the directory containing bot files.
        exclude: List of filenames to skip.

    Returns:
        List of instantiated Bot objects, in file name order.
    """
    if exclude is None:
        exclude = ["__init__.py"]

    bots = []
    bot_dir = os.path.abspath(directory)

    # Add project root to path if needed
    project_root = os.path.dirname(bot_dir)
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

    package = os.path.basename(bot_dir)
    for filename in sorted(os.listdir(bot_dir)):
        if not filename.endswith(".py") or filename in exclude:
            continue

        module_name = f"{package}.{filename[:-3]}"
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            print(f"  Warning: Could not load {filename}: {e}", file=sys.stderr)
            continue

        for name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, Bot)
                and obj is not Bot
                and not inspect.isabstract(obj)
                and obj.__module__ == module.__name__
            ):
                try:
                    bots.append(obj())
                except Exception as e:
                    print(
                        f"  Warning: Could not instantiate {name}: {e}",
                        file=sys.stderr,
                    )

    return bots


def find_bot(bots: List[Bot], name: str) -> Tuple[Optional[Bot], List[str]]:
    """Pick a bot by name, ignoring case.

    Returns:
        The bot (or None) and the list of available names.
    """
    names = [b.name for b in bots]
    for bot in bots:
        if bot.name.lower() == name.lower():
            return bot, names
    return None, names
