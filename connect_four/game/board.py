"""
board.py - Board representation for Connect Four

This module implements the Board class which owns the grid, applies the
column drop rule and answers validity and fullness questions. Win detection
lives in win_detector.py.
"""

import numpy as np
from typing import List, Sequence

from connect_four.debug import debug
from connect_four.utils import ROWS, COLS, Disc


class Board:
    """
    A fixed 6x7 Connect Four grid.

    Row 0 is the top of the board and row ROWS-1 the bottom. Alongside the
    grid a per-column counter records how many discs each column holds; both
    are only ever changed together by place_disc.
    """

    def __init__(self):
        """Initialize an empty board."""
        self.grid = np.zeros((ROWS, COLS), dtype=int)
        self.heights = np.zeros(COLS, dtype=int)
        debug.trace("Initialized empty board", "board")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from text rows of glyphs, top row first.

        Whitespace inside a row is ignored, so both "R.Y...." and the rendered
        form "R . Y . . . ." are accepted.

        Raises:
            ValueError: on wrong dimensions, unknown glyphs or a disc resting
                above an empty cell
        """
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        board = cls()
        for row, text in enumerate(rows):
            glyphs = "".join(text.split())
            if len(glyphs) != COLS:
                raise ValueError(f"Row {row} must have {COLS} cells, got {len(glyphs)}")
            for col, glyph in enumerate(glyphs):
                board.grid[row, col] = Disc.from_glyph(glyph).value

        for col in range(COLS):
            occupied = board.grid[:, col] != Disc.EMPTY.value
            height = int(occupied.sum())
            # occupied cells must be exactly the bottom `height` rows
            if not occupied[ROWS - height:].all():
                raise ValueError(f"Column {col} has a disc above an empty cell")
            board.heights[col] = height

        return board

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board with the same grid and counters
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.heights = self.heights.copy()
        return new_board

    def cell(self, row: int, column: int) -> Disc:
        return Disc(int(self.grid[row, column]))

    def column_height(self, column: int) -> int:
        """Number of discs in a column."""
        return int(self.heights[column])

    def move_count(self) -> int:
        return int(self.heights.sum())

    def is_column_valid(self, column: int) -> bool:
        """
        Check if a disc can be dropped into a column.

        Args:
            column: The column index (0-indexed)

        Returns:
            True if the column is on the board and not full
        """
        if not (0 <= column < COLS):
            debug.debug(f"Invalid column {column}: out of bounds", "board")
            return False

        if self.heights[column] >= ROWS:
            debug.debug(f"Invalid column {column}: column is full", "board")
            return False

        return True

    def valid_columns(self) -> List[int]:
        """
        Get the columns that can still take a disc.

        Returns:
            List of valid column indices
        """
        return [col for col in range(COLS) if self.heights[col] < ROWS]

    def place_disc(self, column: int, disc: Disc) -> bool:
        """
        Drop a disc into a column; it lands on the lowest empty cell.

        Args:
            column: The column index (0-indexed)
            disc: The disc to place

        Returns:
            True if the disc was placed, False if the column was invalid (the
            board is left unchanged)
        """
        if disc == Disc.EMPTY:
            debug.warning(f"Refusing to place an empty disc in column {column}", "board")
            return False

        if not self.is_column_valid(column):
            return False

        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == Disc.EMPTY.value:
                self.grid[row, column] = disc.value
                self.heights[column] += 1
                debug.trace(f"Placed {disc.name} at ({row}, {column})", "board")
                return True

        # The counter said there was room but the grid disagrees
        debug.error(f"Column {column} counter out of sync with grid", "board")
        return False

    def is_full(self) -> bool:
        """Check if every column holds ROWS discs."""
        return bool(np.all(self.heights == ROWS))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 2D grid of Disc values
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as text.

        One line per row top to bottom, one glyph per cell separated by
        spaces, followed by a blank line.

        Returns:
            String representation of the board
        """
        lines = [" ".join(Disc(int(value)).glyph for value in row) for row in self.grid]
        return "\n".join(lines) + "\n\n"

    def __str__(self) -> str:
        return self.render()
