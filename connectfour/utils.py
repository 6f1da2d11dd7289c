"""
utils.py - Constants, cell type, and shared helpers for Connect Four

This module provides the board dimensions, the tagged Cell value stored in
the grid, direction vectors used by win detection, and the ASCII renderer
shared by the Grid and the console interface.
"""

import numbers
from enum import Enum, auto
from typing import Iterable, Optional, Tuple

# Game constants
ROW_COUNT = 6
COLUMN_COUNT = 7
CONNECT_N = 4  # Number of discs in a row to win

# Console glyphs
EMPTY_GLYPH = "-"

Coord = Tuple[int, int]  # (row, column)


class Cell:
    """
    A single grid cell: either empty or occupied by a player's marker.

    Empty is its own state rather than a reserved character, so no marker
    can ever be mistaken for an empty slot.
    """

    __slots__ = ("_marker",)

    EMPTY: "Cell"

    def __init__(self, marker: Optional[str] = None):
        self._marker = marker

    @property
    def marker(self) -> Optional[str]:
        """The occupying marker, or None for an empty cell."""
        return self._marker

    @property
    def is_empty(self) -> bool:
        return self._marker is None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._marker == other._marker

    def __hash__(self) -> int:
        return hash(("Cell", self._marker))

    def __repr__(self) -> str:
        if self.is_empty:
            return "Cell.EMPTY"
        return f"Cell({self._marker!r})"

    def __str__(self) -> str:
        return EMPTY_GLYPH if self.is_empty else self._marker


Cell.EMPTY = Cell()


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROW_COUNT and 0 <= col < COLUMN_COUNT


def is_valid_column(column) -> bool:
    """Check that a column is an integer between 0 and COLUMN_COUNT - 1."""
    if isinstance(column, bool) or not isinstance(column, numbers.Integral):
        return False
    return 0 <= column < COLUMN_COUNT


def is_valid_marker(marker) -> bool:
    """Check that a marker is a single-character string."""
    return isinstance(marker, str) and len(marker) == 1


def line_from(start: Coord, direction: Direction, length: int = CONNECT_N) -> list:
    """
    Expand a starting cell into the coordinates of a straight line.

    Args:
        start: (row, col) of the first cell
        direction: Direction the line runs in
        length: Number of cells in the line

    Returns:
        List of (row, col) positions
    """
    dr, dc = DIRECTION_VECTORS[direction]
    row, col = start
    return [(row + i * dr, col + i * dc) for i in range(length)]


def render_board_ascii(cells: Iterable[Tuple[int, int, Cell]]) -> str:
    """
    Render the board as ASCII art.

    Args:
        cells: (row, col, Cell) triples in row-major order, top row first

    Returns:
        ASCII representation of the board
    """
    rows = [[EMPTY_GLYPH] * COLUMN_COUNT for _ in range(ROW_COUNT)]
    for row, col, cell in cells:
        rows[row][col] = str(cell)

    result = [""]
    for glyphs in rows:
        result.append("|" + "".join(glyphs) + "|")

    # 1-based column numbers, matching what the player types
    result.append(" " + "".join(str(i + 1) for i in range(COLUMN_COUNT)) + " ")

    return "\n".join(result)
