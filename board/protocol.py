"""Reading the judge's input.

The judge first sends the board, then one block per turn. The game ends
when the judge stops writing, which surfaces here as ``EOFError``.
"""

import logging
from typing import Dict, List, Mapping, TextIO

from board.actions import Action, InvalidActionError
from board.cell import NO_NEIGHBOUR, NUM_DIRECTIONS, Cell, Tree
from board.state import GameState

logger = logging.getLogger(__name__)


class ProtocolError(Exception):
    """Raised when a line from the judge does not have the expected shape."""
    pass


class LineReader:
    """Reads the judge's stream one line at a time.

    Keeps a count of lines consumed so errors can point at the culprit.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.line_number = 0

    def next_line(self) -> str:
        """Return the next line without its newline.

        Raises:
            EOFError: If the stream is exhausted.
        """
        line = self._stream.readline()
        if not line:
            raise EOFError("Judge closed the input stream")
        self.line_number += 1
        return line.rstrip("\r\n")

    def next_ints(self, count: int) -> List[int]:
        """Read the first ``count`` integers of a line.

        Fields after the first ``count`` are ignored.

        Raises:
            ProtocolError: If the line has too few fields or one of the
                first ``count`` is not an integer.
        """
        line = self.next_line()
        parts = line.split()
        if len(parts) < count:
            raise ProtocolError(
                f"Line {self.line_number}: expected {count} integers, "
                f"got '{line}'"
            )
        try:
            values = [int(p) for p in parts[:count]]
        except ValueError:
            raise ProtocolError(
                f"Line {self.line_number}: non-integer value in '{line}'"
            )
        if len(parts) > count:
            logger.debug(
                "Line %d: ignoring extra fields in '%s'", self.line_number, line
            )
        return values

    def next_int(self) -> int:
        return self.next_ints(1)[0]

    def next_ints_or_zeros(self, count: int) -> List[int]:
        """Like next_ints(), but a malformed line reads as zeros.

        The line is consumed either way, so the stream stays in step.
        """
        try:
            return self.next_ints(count)
        except ProtocolError as e:
            logger.warning("%s; reading it as zeros", e)
            return [0] * count


def read_cells(reader: LineReader) -> Dict[int, Cell]:
    """Read the board description sent once at the start of the game.

    The board is checked strictly since every later turn is read against it.

    Raises:
        ProtocolError: If a row is malformed or a neighbour index points
            at a cell that was not sent.
    """
    number_of_cells = reader.next_int()
    cells = {}
    for _ in range(number_of_cells):
        index, richness, *neighbours = reader.next_ints(2 + NUM_DIRECTIONS)
        cells[index] = Cell(index, richness, neighbours)

    for cell in cells.values():
        for neighbour in cell.neighbours:
            if neighbour != NO_NEIGHBOUR and neighbour not in cells:
                raise ProtocolError(
                    f"Cell {cell.index} has unknown neighbour {neighbour}"
                )
    return cells


def _read_tree(reader: LineReader, cells: Mapping[int, Cell]) -> Tree:
    cell_index, size, is_mine, is_dormant = reader.next_ints(4)
    if cell_index not in cells:
        raise ProtocolError(
            f"Line {reader.line_number}: tree on unknown cell {cell_index}"
        )
    try:
        return Tree(cell_index, size, is_mine != 0, is_dormant != 0)
    except ValueError as e:
        raise ProtocolError(f"Line {reader.line_number}: {e}")


def read_turn(reader: LineReader, cells: Mapping[int, Cell]) -> GameState:
    """Read one turn's block and build the state for it.

    A malformed value line reads as zeros, and tree or legal-action lines
    that cannot be understood are skipped, all with a warning. Only the
    two count lines must parse, since the rest of the block cannot be
    found without them.

    Raises:
        ProtocolError: If a count line is malformed.
    """
    day = reader.next_ints_or_zeros(1)[0]
    nutrients = reader.next_ints_or_zeros(1)[0]
    sun, score = reader.next_ints_or_zeros(2)
    opp_sun, opp_score, opp_is_waiting = reader.next_ints_or_zeros(3)

    trees = []
    for _ in range(reader.next_int()):
        try:
            trees.append(_read_tree(reader, cells))
        except ProtocolError as e:
            logger.warning("Ignoring tree: %s", e)

    actions = []
    for _ in range(reader.next_int()):
        line = reader.next_line()
        try:
            actions.append(Action.parse(line))
        except InvalidActionError as e:
            logger.warning("Ignoring action line %d: %s", reader.line_number, e)

    return GameState(
        cells,
        day=day,
        nutrients=nutrients,
        sun=sun,
        score=score,
        opp_sun=opp_sun,
        opp_score=opp_score,
        opp_is_waiting=opp_is_waiting != 0,
        trees=trees,
        possible_actions=actions,
    )
