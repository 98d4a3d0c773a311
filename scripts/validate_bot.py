#!/usr/bin/env python3
"""Bot validation tool.

Run this script before submitting a new iteration to catch common errors:
    python scripts/validate_bot.py bots/my_bot.py

The validator checks:
- File exists and is readable
- Bot class inherits from framework.bot_interface.Bot
- Bot has a name
- decide() is implemented
- Bot handles a turn where only WAIT is possible
- Bot returns legal Actions on sample turns
- Bot decides well inside the judge's time limit
"""

import importlib.util
import inspect
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from board.actions import Action
from board.cell import Tree
from board.layout import standard_cells
from board.state import GameState
from framework.bot_interface import Bot
from framework.runner import DECISION_TIMEOUT_SECONDS


class ValidationResult:
    """Result of a validation check."""

    def __init__(self, passed: bool, message: str, warning: bool = False):
        self.passed = passed
        self.message = message
        self.warning = warning

    def __str__(self):
        if self.warning:
            return f"⚠  {self.message}"
        elif self.passed:
            return f"✓ {self.message}"
        else:
            return f"✗ {self.message}"


def sample_turns() -> List[GameState]:
    """A handful of hand-made turns covering the phases of a game."""
    cells = standard_cells()
    opening_trees = [
        Tree(25, 1, True), Tree(34, 1, True),
        Tree(28, 1, False), Tree(19, 1, False),
    ]
    opening = GameState(
        cells, day=0, sun=2, trees=opening_trees,
        possible_actions=[
            Action.wait(), Action.grow(25), Action.grow(34),
        ],
    )
    midgame_trees = [
        Tree(0, 2, True), Tree(1, 1, True), Tree(7, 0, True),
        Tree(4, 2, False), Tree(13, 3, False),
    ]
    midgame = GameState(
        cells, day=9, sun=12, score=4, opp_sun=8, opp_score=4,
        trees=midgame_trees,
        possible_actions=[
            Action.wait(),
            Action.seed(0, 2), Action.seed(0, 3), Action.seed(1, 8),
            Action.grow(0), Action.grow(1), Action.grow(7),
        ],
    )
    endgame_trees = [
        Tree(0, 3, True), Tree(2, 3, True), Tree(9, 2, True),
        Tree(5, 3, False), Tree(14, 1, False),
    ]
    endgame = GameState(
        cells, day=22, nutrients=12, sun=9, score=30,
        opp_sun=3, opp_score=35, trees=endgame_trees,
        possible_actions=[
            Action.wait(), Action.complete(0), Action.complete(2),
            Action.grow(9),
        ],
    )
    stuck = GameState(
        cells, day=23, sun=0, trees=[Tree(0, 1, True)],
        possible_actions=[Action.wait()],
    )
    return [opening, midgame, endgame, stuck]


def check_file_exists(bot_path: str) -> ValidationResult:
    """Check if the bot file exists and is readable."""
    path = Path(bot_path)
    if not path.exists():
        return ValidationResult(False, f"File not found: {bot_path}")
    if not path.is_file():
        return ValidationResult(False, f"Not a file: {bot_path}")
    if not path.suffix == ".py":
        return ValidationResult(False, f"Not a Python file: {bot_path}")
    return ValidationResult(True, f"File exists: {bot_path}")


def load_bot_class(bot_path: str) -> Tuple[Optional[type], Optional[ValidationResult]]:
    """Load the bot class from the file."""
    try:
        spec = importlib.util.spec_from_file_location("candidate_bot", bot_path)
        if spec is None or spec.loader is None:
            return None, ValidationResult(False, "Could not load module spec")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        bot_classes = [
            obj for name, obj in inspect.getmembers(module, inspect.isclass)
            if issubclass(obj, Bot) and obj != Bot
            and obj.__module__ == module.__name__
        ]

        if not bot_classes:
            return None, ValidationResult(False, "No Bot subclass found in file")

        if len(bot_classes) > 1:
            return bot_classes[0], ValidationResult(
                True,
                f"Multiple bot classes found, using {bot_classes[0].__name__}",
                warning=True
            )

        return bot_classes[0], ValidationResult(True, f"Bot class loaded: {bot_classes[0].__name__}")

    except SyntaxError as e:
        return None, ValidationResult(False, f"Syntax error: {e}")
    except Exception as e:
        return None, ValidationResult(False, f"Failed to load bot: {type(e).__name__}: {e}")


def check_inherits_from_bot(bot_class: type) -> ValidationResult:
    """Check if bot class inherits from Bot."""
    if not issubclass(bot_class, Bot):
        return ValidationResult(False, "Bot class does not inherit from framework.bot_interface.Bot")
    return ValidationResult(True, "Bot inherits from framework.bot_interface.Bot")


def check_has_name_property(bot_class: type) -> ValidationResult:
    """Check if bot has a name property."""
    try:
        name = bot_class().name
        if not name or not isinstance(name, str):
            return ValidationResult(False, "Bot name property is empty or not a string")
        if name == "Bot":
            return ValidationResult(
                True,
                f"Bot has generic name '{name}' - consider using a unique name",
                warning=True
            )
        return ValidationResult(True, f"Bot has name: '{name}'")
    except Exception as e:
        return ValidationResult(False, f"Could not get bot name: {type(e).__name__}: {e}")


def check_decide_implemented(bot_class: type) -> ValidationResult:
    """Check that decide() exists and is not abstract."""
    if inspect.isabstract(bot_class):
        return ValidationResult(False, "Missing method: decide(self, state: GameState) -> Action")
    return ValidationResult(True, "Method implemented: decide")


def check_handles_wait_only_turn(bot_class: type) -> ValidationResult:
    """Check if the bot copes with a turn where nothing but WAIT is legal."""
    stuck = sample_turns()[-1]
    try:
        bot = bot_class()
        bot.on_game_start(stuck.cells)
        action = bot.decide(stuck)
        if not isinstance(action, Action) or not stuck.is_legal(action):
            return ValidationResult(False, f"WAIT-only turn answered with: {action!r}")
        return ValidationResult(True, "Bot handles a WAIT-only turn")
    except Exception as e:
        return ValidationResult(False, f"Bot crashes on a WAIT-only turn: {type(e).__name__}: {e}")


def check_legal_on_sample_turns(bot_class: type) -> ValidationResult:
    """Check that every answer on the sample turns is a legal Action."""
    turns = sample_turns()
    try:
        bot = bot_class()
        bot.on_game_start(turns[0].cells)
        for state in turns:
            action = bot.decide(state)
            if not isinstance(action, Action):
                return ValidationResult(
                    False,
                    f"Day {state.day}: decide() returned {type(action).__name__}, not Action"
                )
            if not state.is_legal(action):
                return ValidationResult(False, f"Day {state.day}: illegal move {action}")
            bot.on_turn_end(state, action)
        return ValidationResult(True, f"Bot made legal moves on {len(turns)} sample turns")
    except Exception as e:
        return ValidationResult(False, f"Bot crashed on sample turns: {type(e).__name__}: {e}")


def check_performance_acceptable(bot_class: type) -> ValidationResult:
    """Check the slowest decision against the judge's limit."""
    turns = sample_turns()
    try:
        bot = bot_class()
        bot.on_game_start(turns[0].cells)
        slowest = 0.0
        for _ in range(20):
            for state in turns:
                start_time = time.perf_counter()
                bot.decide(state)
                slowest = max(slowest, time.perf_counter() - start_time)

        limit = DECISION_TIMEOUT_SECONDS
        if slowest > limit:
            return ValidationResult(
                False,
                f"Slowest decision took {slowest * 1000:.1f}ms - over the {limit * 1000:.0f}ms limit"
            )
        elif slowest > limit / 2:
            return ValidationResult(
                True,
                f"Slowest decision took {slowest * 1000:.1f}ms - acceptable but close to the limit",
                warning=True
            )
        return ValidationResult(True, f"Slowest decision took {slowest * 1000:.1f}ms - good performance")

    except Exception as e:
        return ValidationResult(False, f"Performance test failed: {type(e).__name__}: {e}")


def validate_bot(bot_path: str) -> Tuple[bool, List[ValidationResult]]:
    """Run all validation checks on a bot file.

    Returns:
        Tuple of (all_passed, list of results)
    """
    results = []

    result = check_file_exists(bot_path)
    results.append(result)
    if not result.passed:
        return False, results

    bot_class, result = load_bot_class(bot_path)
    results.append(result)
    if bot_class is None:
        return False, results

    result = check_inherits_from_bot(bot_class)
    results.append(result)
    if not result.passed:
        return False, results

    result = check_decide_implemented(bot_class)
    results.append(result)
    if not result.passed:
        return False, results

    results.append(check_has_name_property(bot_class))

    for check in (
        check_handles_wait_only_turn,
        check_legal_on_sample_turns,
        check_performance_acceptable,
    ):
        result = check(bot_class)
        results.append(result)
        if not result.passed:
            return False, results

    all_passed = all(r.passed for r in results if not r.warning)
    return all_passed, results


def main():
    """Main entry point."""
    if len(sys.argv) != 2:
        print("Usage: python scripts/validate_bot.py <bot_file.py>")
        print("\nExample: python scripts/validate_bot.py bots/sun_bot.py")
        sys.exit(1)

    bot_path = sys.argv[1]

    print("=" * 60)
    print("FOREST BOT VALIDATOR")
    print("=" * 60)
    print(f"\nValidating: {bot_path}\n")

    all_passed, results = validate_bot(bot_path)

    for result in results:
        print(result)

    print("\n" + "=" * 60)
    if all_passed:
        print("✓ VALIDATION PASSED")
        print("=" * 60)
        sys.exit(0)
    else:
        print("✗ VALIDATION FAILED")
        print("=" * 60)
        print("\nPlease fix the errors above before submitting.")
        sys.exit(1)


if __name__ == "__main__":
    main()
