"""Cells and trees on the hexagonal board."""

from enum import Enum
from typing import List

NUM_CELLS = 37
NUM_DIRECTIONS = 6
MAX_DAY = 23
MAX_TREE_SIZE = 3
COMPLETE_COST = 4

# Base sun cost of growing a tree *to* the given size
BASE_GROW_COSTS = {1: 1, 2: 3, 3: 7}

NO_NEIGHBOUR = -1


class Richness(Enum):
    UNUSABLE = 0
    POOR = 1
    OK = 2
    LUSH = 3


# Extra points scored when completing a tree on a cell of this richness
RICHNESS_BONUS = {
    Richness.UNUSABLE: 0,
    Richness.POOR: 0,
    Richness.OK: 2,
    Richness.LUSH: 4,
}


class Cell:
    """A fixed board position with its richness and six neighbours."""

    __slots__ = ("index", "richness", "neighbours")

    def __init__(self, index: int, richness: int, neighbours: List[int]):
        if len(neighbours) != NUM_DIRECTIONS:
            raise ValueError(
                f"Cell {index} needs {NUM_DIRECTIONS} neighbours, "
                f"got {len(neighbours)}"
            )
        self.index = index
        self.richness = richness
        self.neighbours = list(neighbours)

    def neighbour(self, direction: int) -> int:
        """Return the neighbour index in a direction, or -1 at the edge."""
        return self.neighbours[direction % NUM_DIRECTIONS]

    @property
    def is_usable(self) -> bool:
        return self.richness > 0

    @property
    def bonus(self) -> int:
        return RICHNESS_BONUS[Richness(self.richness)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self.index == other.index
            and self.richness == other.richness
            and self.neighbours == other.neighbours
        )

    def __hash__(self) -> int:
        return hash(self.index)

    def __repr__(self) -> str:
        return f"Cell({self.index}, richness={self.richness})"


class Tree:
    """A tree (or seed) standing on a cell."""

    __slots__ = ("cell_index", "size", "is_mine", "is_dormant")

    def __init__(
        self,
        cell_index: int,
        size: int,
        is_mine: bool,
        is_dormant: bool = False,
    ):
        if not 0 <= size <= MAX_TREE_SIZE:
            raise ValueError(f"Tree size must be 0-{MAX_TREE_SIZE}, got {size}")
        self.cell_index = cell_index
        self.size = size
        self.is_mine = is_mine
        self.is_dormant = is_dormant

    @property
    def is_seed(self) -> bool:
        return self.size == 0

    def grown(self) -> "Tree":
        """Return a copy of this tree one size larger.

        Raises:
            ValueError: If the tree is already fully grown.
        """
        return Tree(self.cell_index, self.size + 1, self.is_mine, True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return (
            self.cell_index == other.cell_index
            and self.size == other.size
            and self.is_mine == other.is_mine
            and self.is_dormant == other.is_dormant
        )

    def __hash__(self) -> int:
        return hash((self.cell_index, self.size, self.is_mine))

    def __repr__(self) -> str:
        owner = "mine" if self.is_mine else "opp"
        dormant = ", dormant" if self.is_dormant else ""
        return f"Tree({self.cell_index}, size={self.size}, {owner}{dormant})"
