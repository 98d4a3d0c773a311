"""RichnessBot - second iteration, soil and calendar aware.

Improves on BasicBot by caring about where and when:
- After day 20, cashes in the tree on the richest cell first
- Only plants while seeds are free, always on the richest cell
- Grows the biggest tree, breaking ties on the richest cell
- Saves its sun otherwise
"""

from board.actions import Action, ActionType
from board.state import GameState
from framework.bot_interface import Bot
from framework.utilities import richest, target_richness, tree_for


class RichnessBot(Bot):
    """Prefers rich cells and completes trees late in the game."""

    LATE_DAY = 20  # Complete trees after this day

    @property
    def name(self) -> str:
        return "RichnessBot"

    def decide(self, state: GameState) -> Action:
        if state.day > self.LATE_DAY:
            complete = richest(state, state.actions_of(ActionType.COMPLETE))
            if complete is not None:
                return complete.with_message("harvest")

        if state.seed_cost() == 0:
            seed = richest(state, state.actions_of(ActionType.SEED))
            if seed is not None:
                return seed.with_message("free seed")

        grows = state.actions_of(ActionType.GROW)
        if grows:
            def grow_key(action):
                tree = tree_for(state, action)
                size = tree.size if tree else 0
                return size, target_richness(state, action)

            return max(grows, key=grow_key).with_message("grow")

        return Action.wait("saving")
