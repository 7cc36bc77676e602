"""
utils.py - Constants and enumerations for Connect Four

This module provides the board geometry, the disc (cell state) enumeration and
the line directions used by win detection.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win


class Disc(Enum):
    """Enumeration of cell states; RED moves first by default."""
    EMPTY = 0
    RED = 1
    YELLOW = 2

    def other(self) -> 'Disc':
        """Get the opposing disc."""
        if self == Disc.RED:
            return Disc.YELLOW
        elif self == Disc.YELLOW:
            return Disc.RED
        return Disc.EMPTY

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_glyph(cls, glyph: str) -> 'Disc':
        """Look up a disc by its rendered glyph (case-insensitive)."""
        for disc, disc_glyph in GLYPHS.items():
            if disc_glyph == glyph.upper():
                return disc
        raise ValueError(f"Unknown glyph: {glyph!r}")

    def __str__(self):
        return self.glyph


GLYPHS: Dict[Disc, str] = {
    Disc.EMPTY: ".",
    Disc.RED: "R",
    Disc.YELLOW: "Y",
}


class Direction(Enum):
    """Line families checked for four-in-a-row."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()  # bottom-left to top-right


# Step (row, col) between consecutive cells of a line
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is on the board, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS
