"""BasicBot - first iteration, a fixed order of importance.

This bot uses straightforward rules:
- Grow a tree whenever one can be grown, biggest first
- Otherwise complete whatever can be completed
- Otherwise plant a seed on the richest reachable cell
- Otherwise wait

It never looks at shadows or the calendar, which makes it a good
yardstick for the later iterations.
"""

from board.actions import Action, ActionType
from board.state import GameState
from framework.bot_interface import Bot
from framework.utilities import richest, tree_for


class BasicBot(Bot):
    """Grow, then complete, then seed, then wait."""

    @property
    def name(self) -> str:
        return "BasicBot"

    def decide(self, state: GameState) -> Action:
        grows = state.actions_of(ActionType.GROW)
        if grows:
            return max(grows, key=lambda a: _size(state, a)).with_message("grow")

        completes = state.actions_of(ActionType.COMPLETE)
        if completes:
            return completes[0].with_message("complete")

        seed = richest(state, state.actions_of(ActionType.SEED))
        if seed is not None:
            return seed.with_message("seed")

        return Action.wait("zzz")


def _size(state: GameState, action: Action) -> int:
    tree = tree_for(state, action)
    return tree.size if tree else 0
