"""SunBot - fourth iteration, plans for the whole sun cycle.

The sun turns one direction a day, so over six days every tree shades
its whole neighbourhood. SunBot scores moves against that cycle:
- Plants on cells no tree will ever shade, richest first
- After the opening, plants on the best scored cell while it has few
  trees and no seed waiting
- Replants from scratch when it is down to a single tree
- In the last days, completes trees that hurt it more than they hurt
  the opponent
- Grows the tree with the best shade trade, pushing size 2 trees to
  size 3 first
- Thins out its big trees once it holds more than a couple
"""

import logging
from typing import Dict, List, Optional

from board.actions import Action, ActionType
from board.shadows import Shadow
from board.state import GameState
from framework.bot_interface import Bot
from framework.utilities import (
    ALL_DIRECTIONS,
    completion_value,
    cycle_shadow_map,
    growth_delta,
    richest,
    seed_delta,
    tree_for,
)

logger = logging.getLogger(__name__)


class SunBot(Bot):
    """The latest iteration and the default bot."""

    SEED_AFTER_DAY = 6  # Scored planting starts after this day
    MAX_TREES = 6  # Scored planting stops at this many trees
    LATE_DAY = 20  # Endgame completions after this day
    OPP_SHADE_LIMIT = 3  # Cut a tree shading fewer opponents than this
    BIG_TREE_LIMIT = 2  # Thin out when holding more size 3 trees

    @property
    def name(self) -> str:
        return "SunBot"

    def decide(self, state: GameState) -> Action:
        shadows = cycle_shadow_map(state)

        if state.can_seed():
            seed = self._seed(state, shadows)
            if seed is not None:
                return seed

        if state.can_complete() and state.day > self.LATE_DAY:
            return self._endgame_complete(state)

        if state.can_grow():
            return self._grow(state, shadows)

        if (
            state.can_complete()
            and state.count_trees() > 1
            and state.count_trees_of_size(3) > self.BIG_TREE_LIMIT
        ):
            return self._thin_out(state)

        return Action.wait("zzz")

    def _seed(
        self, state: GameState, shadows: Dict[int, List[Shadow]]
    ) -> Optional[Action]:
        seeds = state.actions_of(ActionType.SEED)

        never_shaded = [a for a in seeds if a.target not in shadows]
        if never_shaded:
            return richest(state, never_shaded).with_message("open ground")

        if (
            state.day > self.SEED_AFTER_DAY
            and state.count_seeds() < 1
            and state.count_trees() < self.MAX_TREES
        ):
            deltas = [seed_delta(state, a, shadows, ALL_DIRECTIONS) for a in seeds]
            deltas.sort(key=lambda d: (-d.richness, d.mine, -d.opp_gain))
            logger.debug("Seed candidates: %s", deltas)
            return deltas[0].action.with_message("best soil")

        if state.count_trees() == 1:
            return seeds[0].with_message("replant")

        return None

    def _endgame_complete(self, state: GameState) -> Action:
        completes = state.actions_of(ActionType.COMPLETE)
        for action in completes:
            tree = tree_for(state, action)
            if tree is None:
                continue
            mine, opp = completion_value(state, tree)
            if mine > opp or opp < self.OPP_SHADE_LIMIT:
                return action.with_message("harvest")
        return completes[0].with_message("harvest")

    def _grow(self, state: GameState, shadows: Dict[int, List[Shadow]]) -> Action:
        grows = state.actions_of(ActionType.GROW)
        deltas = []
        for action in grows:
            tree = tree_for(state, action)
            if tree is None:
                continue
            deltas.append(growth_delta(state, tree, shadows, ALL_DIRECTIONS))

        if not deltas:
            return grows[0]

        deltas.sort(key=lambda d: (d.mine, -d.opp_gain))
        logger.debug("Grow candidates: %s", deltas)
        for delta in deltas:
            if delta.size == 2:
                return delta.action.with_message("reach up")
        return deltas[0].action.with_message("grow")

    def _thin_out(self, state: GameState) -> Action:
        def cut_value(action):
            tree = tree_for(state, action)
            if tree is None:
                return -1, 0
            mine, opp = completion_value(state, tree)
            return mine, -opp

        completes = state.actions_of(ActionType.COMPLETE)
        return max(completes, key=cut_value).with_message("thin out")
