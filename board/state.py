"""Per-turn game state snapshot."""

from typing import Dict, Iterable, List, Mapping, Optional

from board.actions import Action, ActionType
from board.cell import (
    BASE_GROW_COSTS,
    COMPLETE_COST,
    MAX_DAY,
    NUM_DIRECTIONS,
    Cell,
    Tree,
)
from board.shadows import Shadow, shadow_map


class GameState:
    """Everything the judge tells us on one turn.

    Bots receive this object from the runner. It is rebuilt from scratch
    every turn; the derived tables (costs, today's shadows) are filled in on
    construction so heuristics can query them freely.
    """

    def __init__(
        self,
        cells: Mapping[int, Cell],
        day: int = 0,
        nutrients: int = 20,
        sun: int = 0,
        score: int = 0,
        opp_sun: int = 0,
        opp_score: int = 0,
        opp_is_waiting: bool = False,
        trees: Iterable[Tree] = (),
        possible_actions: Iterable[Action] = (),
    ):
        self.cells = dict(cells)
        self.day = day
        self.nutrients = nutrients
        self.sun = sun
        self.score = score
        self.opp_sun = opp_sun
        self.opp_score = opp_score
        self.opp_is_waiting = opp_is_waiting

        self.trees: Dict[int, Tree] = {t.cell_index: t for t in trees}

        self.possible_actions: Dict[ActionType, List[Action]] = {
            t: [] for t in ActionType
        }
        for action in possible_actions:
            self.possible_actions[action.type].append(action)

        self.costs = self._grow_costs()
        self.shadows: Dict[int, List[Shadow]] = shadow_map(
            self.cells, self.trees.values(), [self.sun_direction]
        )

    def _grow_costs(self) -> Dict[int, int]:
        # costs[0] is the seed cost, costs[s] the cost of growing to size s
        costs = {0: 0}
        costs.update(BASE_GROW_COSTS)
        for tree in self.my_trees():
            costs[tree.size] += 1
        return costs

    # --- Sun ---

    @property
    def sun_direction(self) -> int:
        return self.day % NUM_DIRECTIONS

    @property
    def sun_direction_tomorrow(self) -> int:
        return (self.day + 1) % NUM_DIRECTIONS

    @property
    def days_left(self) -> int:
        """Days remaining after today."""
        return MAX_DAY - self.day

    # --- Lookups ---

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    def tree_at(self, index: int) -> Optional[Tree]:
        return self.trees.get(index)

    def shadows_at(self, index: int) -> List[Shadow]:
        return list(self.shadows.get(index, []))

    def is_shadowed(self, index: int) -> bool:
        return bool(self.shadows.get(index))

    def my_trees(self) -> List[Tree]:
        return [t for t in self.trees.values() if t.is_mine]

    def opponent_trees(self) -> List[Tree]:
        return [t for t in self.trees.values() if not t.is_mine]

    def count_seeds(self) -> int:
        return self.count_trees_of_size(0)

    def count_trees(self) -> int:
        """Number of my trees, seeds included."""
        return len(self.my_trees())

    def count_trees_of_size(self, size: int) -> int:
        return sum(1 for t in self.my_trees() if t.size == size)

    # --- Costs ---

    def seed_cost(self) -> int:
        return self.costs[0]

    def grow_cost(self, current_size: int) -> int:
        """Cost of growing one of my trees from ``current_size``."""
        return self.costs[current_size + 1]

    def complete_cost(self) -> int:
        return COMPLETE_COST

    # --- Legal actions ---

    def actions_of(self, action_type: ActionType) -> List[Action]:
        return list(self.possible_actions[action_type])

    def all_actions(self) -> List[Action]:
        return [a for t in ActionType for a in self.possible_actions[t]]

    def can_seed(self) -> bool:
        return bool(self.possible_actions[ActionType.SEED])

    def can_grow(self) -> bool:
        return bool(self.possible_actions[ActionType.GROW])

    def can_complete(self) -> bool:
        return bool(self.possible_actions[ActionType.COMPLETE])

    def is_legal(self, action: Action) -> bool:
        """WAIT is always legal; everything else must be in the judge's list."""
        if action.type == ActionType.WAIT:
            return True
        return action in self.possible_actions[action.type]

    def __repr__(self) -> str:
        return (
            f"GameState(day={self.day}, sun={self.sun}, score={self.score}, "
            f"trees={len(self.trees)}, actions={len(self.all_actions())})"
        )
