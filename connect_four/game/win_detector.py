"""
win_detector.py - Four-in-a-row detection

Pure functions over a Board. Each line family is scanned over every window
of CONNECT_N cells that fits on the board; a family matches when all cells of
some window hold the requested disc.
"""

from typing import Dict, Iterator, List, Tuple

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.utils import ROWS, COLS, CONNECT_N, Disc, Direction, DIRECTION_VECTORS

Cell = Tuple[int, int]

# Starting rows and columns for every window of each family
WINDOW_STARTS: Dict[Direction, Tuple[range, range]] = {
    Direction.HORIZONTAL: (range(ROWS), range(COLS - CONNECT_N + 1)),
    Direction.VERTICAL: (range(ROWS - CONNECT_N + 1), range(COLS)),
    Direction.DIAGONAL_DOWN: (range(ROWS - CONNECT_N + 1), range(COLS - CONNECT_N + 1)),
    Direction.DIAGONAL_UP: (range(CONNECT_N - 1, ROWS), range(COLS - CONNECT_N + 1)),
}


def iter_windows(direction: Direction) -> Iterator[List[Cell]]:
    """Yield the cells of every window in a line family."""
    dr, dc = DIRECTION_VECTORS[direction]
    rows, cols = WINDOW_STARTS[direction]
    for row in rows:
        for col in cols:
            yield [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]


def _window_matches(board: Board, window: List[Cell], value: int) -> bool:
    return all(board.grid[row, col] == value for row, col in window)


def find_line(board: Board, disc: Disc, direction: Direction) -> List[Cell]:
    """
    Find the first window of a family completely filled with a disc.

    Returns:
        The window's cells, or an empty list if none matches
    """
    if disc == Disc.EMPTY:
        return []

    for window in iter_windows(direction):
        if _window_matches(board, window, disc.value):
            return window
    return []


def check_direction(board: Board, disc: Disc, direction: Direction) -> bool:
    """Check a single line family for four-in-a-row."""
    return bool(find_line(board, disc, direction))


def find_winning_line(board: Board, disc: Disc) -> List[Cell]:
    """
    Get the cells of a four-in-a-row for a disc.

    Args:
        board: The board to inspect
        disc: The disc to look for

    Returns:
        List of (row, col) cells, or an empty list if the disc has no win
    """
    for direction in Direction:
        line = find_line(board, disc, direction)
        if line:
            debug.debug(f"{disc.name} has four in a row ({direction.name}) at {line}", "win")
            return line
    return []


def check_win(board: Board, disc: Disc) -> bool:
    """
    Check whether a disc has four in a row anywhere on the board.

    All four line families are considered; the result is their logical OR.
    The board is not modified.

    Args:
        board: The board to inspect
        disc: The disc to check for; Disc.EMPTY never wins

    Returns:
        True if the disc has four in a row
    """
    return any(check_direction(board, disc, direction) for direction in Direction)
