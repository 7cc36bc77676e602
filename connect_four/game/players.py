"""
players.py - Players and move sources for Connect Four

A move source is anything with a get_move(board) method that returns a column
which is valid on that board. The console implementation lives in
connect_four.interfaces.cli; scripted and random sources live here.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol

import numpy as np

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.utils import Disc


class MoveSource(Protocol):
    def get_move(self, board: Board) -> int:
        """Return a column for which board.is_column_valid holds."""
        ...


class MoveSourceExhausted(RuntimeError):
    """Raised when a scripted move source has no moves left."""


@dataclass(frozen=True)
class Player:
    name: str
    disc: Disc
    move_source: MoveSource

    def get_move(self, board: Board) -> int:
        return self.move_source.get_move(board)

    def __str__(self):
        return f"{self.name} ({self.disc.label})"


class ScriptedMoveSource:
    """
    Replays a fixed sequence of columns.

    Entries that are not valid when requested are skipped, so a script never
    hands an invalid column to the game loop.
    """

    def __init__(self, columns: Iterable[int]):
        self.columns: List[int] = list(columns)
        self.position = 0

    @property
    def remaining(self) -> int:
        return len(self.columns) - self.position

    def get_move(self, board: Board) -> int:
        while self.position < len(self.columns):
            column = self.columns[self.position]
            self.position += 1
            if board.is_column_valid(column):
                return column
            debug.info(f"Skipping scripted column {column}: not playable", "game")

        raise MoveSourceExhausted(f"Script ran out after {len(self.columns)} moves")


class RandomMoveSource:
    """Picks uniformly among the valid columns."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def get_move(self, board: Board) -> int:
        valid_columns = board.valid_columns()
        if not valid_columns:
            raise MoveSourceExhausted("No valid columns left on the board")
        return int(self.rng.choice(valid_columns))
