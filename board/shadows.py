"""Shadow projection, spookiness and sun income."""

from typing import Dict, Iterable, List, Mapping, Tuple

from board.cell import NO_NEIGHBOUR, Cell, Tree

Cells = Mapping[int, Cell]
Trees = Mapping[int, Tree]


class Shadow:
    """A cell darkened by a tree of ``size`` standing on ``origin``."""

    __slots__ = ("cell_index", "origin", "size", "direction")

    def __init__(self, cell_index: int, origin: int, size: int, direction: int):
        self.cell_index = cell_index
        self.origin = origin
        self.size = size
        self.direction = direction

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shadow):
            return NotImplemented
        return (
            self.cell_index == other.cell_index
            and self.origin == other.origin
            and self.size == other.size
            and self.direction == other.direction
        )

    def __hash__(self) -> int:
        return hash((self.cell_index, self.origin, self.size, self.direction))

    def __repr__(self) -> str:
        return (
            f"Shadow({self.cell_index} <- {self.origin}, "
            f"size={self.size}, dir={self.direction})"
        )


def shadow_cells(cells: Cells, index: int, size: int, direction: int) -> List[int]:
    """Return the cells a tree of ``size`` on ``index`` shades in a direction.

    The shadow is ``size`` cells long and stops at the edge of the board.
    """
    result = []
    current = index
    for _ in range(size):
        current = cells[current].neighbour(direction)
        if current == NO_NEIGHBOUR:
            break
        result.append(current)
    return result


def cast_shadows(cells: Cells, tree: Tree, directions: Iterable[int]) -> List[Shadow]:
    """Return every shadow a tree casts for the given sun directions."""
    if tree.is_seed:
        return []
    return [
        Shadow(i, tree.cell_index, tree.size, d)
        for d in directions
        for i in shadow_cells(cells, tree.cell_index, tree.size, d)
    ]


def shadow_map(
    cells: Cells,
    trees: Iterable[Tree],
    directions: Iterable[int],
) -> Dict[int, List[Shadow]]:
    """Group the shadows of all trees by the cell they fall on."""
    directions = list(directions)
    shadows: Dict[int, List[Shadow]] = {}
    for tree in trees:
        for shadow in cast_shadows(cells, tree, directions):
            shadows.setdefault(shadow.cell_index, []).append(shadow)
    return shadows


def is_spooked(shadows: Mapping[int, List[Shadow]], tree: Tree) -> bool:
    """Check if a tree sits in the shadow of a tree at least as big.

    Spooked trees produce no sun. Seeds never produce sun, so they are
    never reported as spooked.
    """
    if tree.is_seed:
        return False
    return any(
        s.size >= tree.size and s.origin != tree.cell_index
        for s in shadows.get(tree.cell_index, [])
    )


def shadowed_tree_counts(
    cells: Cells,
    trees: Trees,
    tree: Tree,
    directions: Iterable[int],
) -> Tuple[int, int]:
    """Count (my, opponent) trees standing in the shadow of ``tree``."""
    shaded = {s.cell_index for s in cast_shadows(cells, tree, directions)}
    mine = opp = 0
    for index in shaded:
        other = trees.get(index)
        if other is None:
            continue
        if other.is_mine:
            mine += 1
        else:
            opp += 1
    return mine, opp


def sun_income(cells: Cells, trees: Trees, direction: int, mine: bool = True) -> int:
    """Return the sun a player collects when the sun points in ``direction``.

    Each tree that is not spooked yields sun points equal to its size.
    """
    shadows = shadow_map(cells, trees.values(), [direction])
    return sum(
        t.size
        for t in trees.values()
        if t.is_mine == mine and not is_spooked(shadows, t)
    )
