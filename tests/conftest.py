"""
Pytest will auto-discover this file.
It defines board positions and helpers shared by the test modules.
"""

from typing import Callable, List, Sequence

import pytest

from connect_four.game.board import Board
from connect_four.game.game_loop import GameLoop
from connect_four.game.players import Player, ScriptedMoveSource
from connect_four.utils import Disc

# Full board without any four-in-a-row: rows follow the pattern A B B A A B
DRAW_ROWS = [
    "RYRYRYR",
    "YRYRYRY",
    "YRYRYRY",
    "RYRYRYR",
    "RYRYRYR",
    "YRYRYRY",
]


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def draw_rows() -> List[str]:
    return list(DRAW_ROWS)


@pytest.fixture
def draw_board(draw_rows: List[str]) -> Board:
    return Board.from_rows(draw_rows)


@pytest.fixture
def renders() -> List[str]:
    """Collects every board rendering sent to the sink."""
    return []


@pytest.fixture
def scripted_game(renders: List[str]) -> Callable[..., GameLoop]:
    """Call the inner function with the moves (Red first) and an optional starting board."""

    def _create_game(moves: Sequence[int], board: Board = None,
                     first_disc: Disc = Disc.RED) -> GameLoop:
        script = ScriptedMoveSource(moves)
        first = Player(first_disc.label, first_disc, script)
        second = Player(first_disc.other().label, first_disc.other(), script)
        return GameLoop(first, second, render_sink=renders.append, board=board)

    return _create_game
