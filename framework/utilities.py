"""Utility functions to help with bot strategy.

Import these functions in your bot to weigh candidate moves.

Example:
    from board.actions import Action, ActionType
    from framework.bot_interface import Bot
    from framework.utilities import richest

    class MyBot(Bot):
        def decide(self, state):
            seed = richest(state, state.actions_of(ActionType.SEED))
            return seed or Action.wait()
"""

from typing import Dict, Iterable, List, Optional

from board.actions import Action
from board.cell import NUM_DIRECTIONS, Tree
from board.shadows import (
    Shadow,
    is_spooked,
    shadow_map,
    shadowed_tree_counts,
    sun_income,
)
from board.state import GameState

ALL_DIRECTIONS = tuple(range(NUM_DIRECTIONS))


# --- Shadows over the sun cycle ---

def cycle_shadow_map(state: GameState) -> Dict[int, List[Shadow]]:
    """Shadows of every tree for all six sun directions.

    A cell listed here will be shaded on at least one day of the cycle.
    """
    return shadow_map(state.cells, state.trees.values(), ALL_DIRECTIONS)


def projected_income(state: GameState, direction: int) -> int:
    """Sun my trees would collect with the sun pointing in ``direction``."""
    return sun_income(state.cells, state.trees, direction, mine=True)


# --- Picking targets ---

def target_richness(state: GameState, action: Action) -> int:
    """Richness of the cell an action targets (0 for WAIT)."""
    if action.target is None:
        return 0
    return state.cell(action.target).richness


def richest(state: GameState, actions: Iterable[Action]) -> Optional[Action]:
    """Return the action on the richest cell, or None if there are none.

    Ties keep the judge's order.
    """
    best = None
    best_richness = -1
    for action in actions:
        richness = target_richness(state, action)
        if richness > best_richness:
            best, best_richness = action, richness
    return best


def tree_for(state: GameState, action: Action) -> Optional[Tree]:
    """Return the tree a GROW or COMPLETE action works on."""
    if action.target is None:
        return None
    return state.tree_at(action.target)


# --- Shadow deltas ---

class ShadowDelta:
    """How one candidate move changes who sits in the shade.

    ``mine`` counts additional shade on my own trees (the candidate itself
    being spooked included) and should be small. ``opp_gain`` counts
    additional opponent trees shaded and should be large.
    """

    __slots__ = ("action", "mine", "opp_gain", "size", "richness")

    def __init__(
        self,
        action: Action,
        mine: int,
        opp_gain: int,
        size: int = 0,
        richness: int = 0,
    ):
        self.action = action
        self.mine = mine
        self.opp_gain = opp_gain
        self.size = size
        self.richness = richness

    def __repr__(self) -> str:
        return (
            f"ShadowDelta({self.action}, mine={self.mine:+d}, "
            f"opp={self.opp_gain:+d}, size={self.size})"
        )


def _shade_on_mine(
    state: GameState,
    tree: Tree,
    shadows: Dict[int, List[Shadow]],
    directions: Iterable[int],
):
    mine, opp = shadowed_tree_counts(state.cells, state.trees, tree, directions)
    if is_spooked(shadows, tree):
        mine += 1
    return mine, opp


def growth_delta(
    state: GameState,
    tree: Tree,
    shadows: Dict[int, List[Shadow]],
    directions: Iterable[int],
) -> ShadowDelta:
    """Compare the shade around ``tree`` before and after it grows a size.

    Args:
        state: Current turn.
        tree: A tree smaller than the maximum size.
        shadows: Shade to test the tree itself against (today's shadows or
            a cycle_shadow_map()).
        directions: Sun directions to project the tree's own shadow in.
    """
    directions = list(directions)
    before_mine, before_opp = _shade_on_mine(state, tree, shadows, directions)
    after_mine, after_opp = _shade_on_mine(state, tree.grown(), shadows, directions)
    return ShadowDelta(
        Action.grow(tree.cell_index),
        mine=after_mine - before_mine,
        opp_gain=after_opp - before_opp,
        size=tree.size,
        richness=state.cell(tree.cell_index).richness,
    )


def seed_delta(
    state: GameState,
    action: Action,
    shadows: Dict[int, List[Shadow]],
    directions: Iterable[int],
) -> ShadowDelta:
    """Score a seed target as if it were a small tree about to grow."""
    sapling = Tree(action.target, 1, is_mine=True, is_dormant=True)
    delta = growth_delta(state, sapling, shadows, directions)
    delta.action = action
    delta.size = 0
    return delta


def completion_value(
    state: GameState,
    tree: Tree,
    directions: Iterable[int] = ALL_DIRECTIONS,
):
    """Return (my, opponent) trees freed from shade if ``tree`` is cut."""
    return shadowed_tree_counts(state.cells, state.trees, tree, directions)
