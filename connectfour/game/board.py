"""
board.py - Grid representation and core game mechanics for Connect Four

This module implements the Grid class which holds the 6x7 playing grid and
provides the three operations a round needs: dropping a disc into a
column, checking whether the grid is full, and checking whether a marker
has four in a row.

The grid is stored as a numpy matrix of small integer codes. Code 0 is an
empty cell; codes 1..n identify markers in the order the grid first saw
them. Callers never see the codes, only Cell values.
"""

from typing import Dict, Iterator, List, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from connectfour.errors import InvalidColumnError, InvalidMarkerError
from connectfour.utils import (ROW_COUNT, COLUMN_COUNT, CONNECT_N, Cell, Coord,
                               Direction, is_valid_column, is_valid_marker,
                               is_valid_position, line_from, render_board_ascii)

EMPTY_CODE = 0


class Grid:
    """
    Represents the Connect Four playing grid.

    Row 0 is the top and row ROW_COUNT - 1 the bottom; discs fall toward
    the bottom. Cells are only ever filled, never cleared, so within each
    column the occupied cells are always a contiguous block resting on the
    bottom row.
    """

    ROW_COUNT = ROW_COUNT
    COLUMN_COUNT = COLUMN_COUNT

    def __init__(self):
        """Initialize an empty grid."""
        # Codes are only handed out on placement, so at most 42 are ever in use
        self.slots = np.zeros((ROW_COUNT, COLUMN_COUNT), dtype=np.int8)
        self._codes: Dict[str, int] = {}
        self._markers: List[str] = []

    def _code_for(self, marker: str) -> int:
        """Return the code for a marker, registering it on first use."""
        code = self._codes.get(marker)
        if code is None:
            self._markers.append(marker)
            code = len(self._markers)
            self._codes[marker] = code
        return code

    def _cell_for(self, code: int) -> Cell:
        if code == EMPTY_CODE:
            return Cell.EMPTY
        return Cell(self._markers[code - 1])

    def _find_empty_row(self, column: int) -> int:
        """
        Find the lowest empty row in a column.

        Returns:
            The row index of the empty slot, or -1 if the column is full
        """
        for row in range(ROW_COUNT - 1, -1, -1):
            if self.slots[row, column] == EMPTY_CODE:
                return row
        return -1

    def attempt_insert(self, column: int, marker: str) -> bool:
        """
        Try to drop a disc into a column.

        The disc settles in the lowest empty cell of the column.

        Args:
            column: The 0-based column to drop into
            marker: Single-character marker identifying the disc's owner

        Returns:
            True if a disc was inserted, False if the column was already full

        Raises:
            InvalidColumnError: column is not an integer in [0, COLUMN_COUNT - 1]
            InvalidMarkerError: marker is not a single-character string
        """
        if not is_valid_column(column):
            raise InvalidColumnError(column)
        if not is_valid_marker(marker):
            raise InvalidMarkerError(marker)

        row = self._find_empty_row(int(column))
        if row < 0:
            return False

        self.slots[row, int(column)] = self._code_for(marker)
        return True

    def is_full(self) -> bool:
        """
        Determine if the grid is full.

        Only the top row is checked: a column can only have its top cell
        filled once every cell below it is filled.
        """
        return bool(np.all(self.slots[0] != EMPTY_CODE))

    def _winning_starts(self, marker: str) -> Iterator[Tuple[Direction, Coord]]:
        """Yield (direction, first cell) for every four-in-a-row of marker."""
        code = self._codes.get(marker)
        if code is None:
            return

        mask = self.slots == code

        # Horizontal and vertical runs
        for direction, axis in ((Direction.HORIZONTAL, 1), (Direction.VERTICAL, 0)):
            hits = sliding_window_view(mask, CONNECT_N, axis=axis).all(axis=-1)
            for row, col in np.argwhere(hits):
                yield direction, (int(row), int(col))

        # Both diagonals, read from every 4x4 block of the grid
        blocks = sliding_window_view(mask, (CONNECT_N, CONNECT_N))
        descending = np.diagonal(blocks, axis1=-2, axis2=-1).all(axis=-1)
        for row, col in np.argwhere(descending):
            yield Direction.DIAGONAL_DOWN, (int(row), int(col))

        ascending = np.diagonal(blocks[..., ::-1, :], axis1=-2, axis2=-1).all(axis=-1)
        for row, col in np.argwhere(ascending):
            # Flipped block rows: the run starts at the block's bottom-left
            yield Direction.DIAGONAL_UP, (int(row) + CONNECT_N - 1, int(col))

    def marker_wins(self, marker: str) -> bool:
        """
        Check if the marker has CONNECT_N discs in a row.

        Horizontal, vertical and both diagonal directions are checked
        across the whole grid. A valid marker that was never placed has
        not won.

        Args:
            marker: The marker to check

        Returns:
            True if a win condition has been met, False otherwise

        Raises:
            InvalidMarkerError: marker is not a single-character string
        """
        if not is_valid_marker(marker):
            raise InvalidMarkerError(marker)
        return next(self._winning_starts(marker), None) is not None

    def winning_line(self, marker: str) -> List[Coord]:
        """
        Get the positions of a winning line for the marker.

        Returns:
            List of (row, col) positions forming the first winning line
            found, or an empty list if the marker has not won

        Raises:
            InvalidMarkerError: marker is not a single-character string
        """
        if not is_valid_marker(marker):
            raise InvalidMarkerError(marker)
        found = next(self._winning_starts(marker), None)
        if found is None:
            return []
        direction, start = found
        return line_from(start, direction)

    def cell(self, row: int, column: int) -> Cell:
        """Return the contents of a single cell."""
        if not is_valid_position(row, column):
            raise IndexError(f"Position ({row}, {column}) is outside the grid")
        return self._cell_for(int(self.slots[row, column]))

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, column, Cell) for every cell, top row first."""
        for row in range(ROW_COUNT):
            for column in range(COLUMN_COUNT):
                yield row, column, self._cell_for(int(self.slots[row, column]))

    def valid_columns(self) -> List[int]:
        """
        Get the columns that can still accept a disc.

        Returns:
            List of column indices, left to right
        """
        return [int(col) for col in np.flatnonzero(self.slots[0] == EMPTY_CODE)]

    def column_height(self, column: int) -> int:
        """Get the number of discs in a column."""
        if not is_valid_column(column):
            raise InvalidColumnError(column)
        return int(np.count_nonzero(self.slots[:, int(column)]))

    def disc_count(self) -> int:
        """Get the number of occupied cells."""
        return int(np.count_nonzero(self.slots))

    def render(self) -> str:
        """
        Render the grid as a string.

        Returns:
            String representation of the grid
        """
        return render_board_ascii(self.cells())

    def __str__(self) -> str:
        """String representation of the grid."""
        return self.render()
