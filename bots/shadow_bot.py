"""ShadowBot - third iteration, looks at today's shade.

Demonstrates the first use of shadow projection:
- Plants only on cells no tree shades today, and only while it owns
  no seed
- Completes trees once the game is nearly over
- Grows the tree whose extra height shades the fewest of its own trees
  and the most of the opponent's
"""

import logging

from board.actions import Action, ActionType
from board.state import GameState
from framework.bot_interface import Bot
from framework.utilities import growth_delta, richest, tree_for

logger = logging.getLogger(__name__)


class ShadowBot(Bot):
    """Weighs grow candidates by today's shadows."""

    LATE_DAY = 20  # Complete trees after this day

    @property
    def name(self) -> str:
        return "ShadowBot"

    def decide(self, state: GameState) -> Action:
        if state.can_seed() and state.count_seeds() == 0:
            sunny = [
                a for a in state.actions_of(ActionType.SEED)
                if not state.is_shadowed(a.target)
            ]
            seed = richest(state, sunny)
            if seed is not None:
                return seed.with_message("sunny seed")

        if state.can_complete() and state.day > self.LATE_DAY:
            complete = richest(state, state.actions_of(ActionType.COMPLETE))
            return complete.with_message("harvest")

        if state.can_grow():
            return self._best_grow(state)

        return Action.wait("zzz")

    def _best_grow(self, state: GameState) -> Action:
        today = [state.sun_direction]
        deltas = []
        for action in state.actions_of(ActionType.GROW):
            tree = tree_for(state, action)
            if tree is None:
                continue
            deltas.append(growth_delta(state, tree, state.shadows, today))

        if not deltas:
            return state.actions_of(ActionType.GROW)[0]

        deltas.sort(key=lambda d: (d.mine, -d.opp_gain))
        logger.debug("Grow candidates: %s", deltas)
        return deltas[0].action.with_message("grow")
