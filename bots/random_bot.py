"""RandomBot - picks a random legal move.

This bot serves as a baseline. Any of the heuristic iterations
should make better use of the board than RandomBot.
"""

import random

from board.actions import Action
from board.state import GameState
from framework.bot_interface import Bot


class RandomBot(Bot):
    """A bot that plays a uniformly random legal action.

    WAIT is only chosen when the judge lists it or nothing else is legal.
    """

    def __init__(self, rng: random.Random = None):
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "RandomBot"

    def decide(self, state: GameState) -> Action:
        choices = state.all_actions()
        if not choices:
            return Action.wait("nothing to do")
        return self._rng.choice(choices)
