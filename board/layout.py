"""The standard 37-cell board.

Cell 0 is the centre and the remaining cells spiral outwards ring by ring.
Direction 0 points east and directions turn counter-clockwise, so the
neighbour of a cell in direction ``d`` is the cell the sun's shadow reaches
when the sun points in direction ``d``.
"""

from typing import Dict, List, Tuple

from board.cell import NO_NEIGHBOUR, NUM_DIRECTIONS, Cell

RING_COUNT = 3

# Cube-coordinate offsets for directions 0..5
_DIRECTIONS: List[Tuple[int, int, int]] = [
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
]

_RING_RICHNESS = {0: 3, 1: 3, 2: 2, 3: 1}


def _step(coord: Tuple[int, int, int], direction: int) -> Tuple[int, int, int]:
    dx, dy, dz = _DIRECTIONS[direction]
    return coord[0] + dx, coord[1] + dy, coord[2] + dz


def _spiral_coords() -> List[Tuple[int, int, int]]:
    coords = [(0, 0, 0)]
    coord = _step((0, 0, 0), 0)
    for distance in range(1, RING_COUNT + 1):
        for orientation in range(NUM_DIRECTIONS):
            for _ in range(distance):
                coords.append(coord)
                coord = _step(coord, (orientation + 2) % NUM_DIRECTIONS)
        coord = _step(coord, 0)
    return coords


def ring_of(index: int) -> int:
    """Return the ring (0 = centre .. 3 = edge) holding a cell index."""
    if index == 0:
        return 0
    first = 1
    for ring in range(1, RING_COUNT + 1):
        last = first + 6 * ring
        if first <= index < last:
            return ring
        first = last
    raise ValueError(f"No cell {index} on the standard board")


def standard_cells() -> Dict[int, Cell]:
    """Build the board the judge sends at the start of every game."""
    coords = _spiral_coords()
    index_of = {coord: i for i, coord in enumerate(coords)}

    cells = {}
    for index, coord in enumerate(coords):
        neighbours = [
            index_of.get(_step(coord, d), NO_NEIGHBOUR)
            for d in range(NUM_DIRECTIONS)
        ]
        cells[index] = Cell(index, _RING_RICHNESS[ring_of(index)], neighbours)
    return cells
