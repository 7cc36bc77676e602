"""
game_loop.py - Turn alternation and terminal-state detection for Connect Four

The GameLoop is a small state machine: it asks the current player's move
source for a column, drops the disc, then checks for a win before checking
for a full board. Once a win or draw is reached no further discs are placed.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.game.players import Player
from connect_four.game.win_detector import check_win, find_winning_line
from connect_four.utils import Disc

RenderSink = Callable[[str], None]


class GameState(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


@dataclass(frozen=True)
class GameOutcome:
    state: GameState
    winner: Optional[Player] = None

    @property
    def is_terminal(self) -> bool:
        return self.state != GameState.IN_PROGRESS


IN_PROGRESS = GameOutcome(GameState.IN_PROGRESS)


def print_render(text: str) -> None:
    print(text, end="")


class GameLoop:
    """
    Runs one game between two players on a fresh board.

    The board is rendered to the sink when the loop starts and after every
    placement, so the final position is always shown after a terminal outcome.
    """

    def __init__(self, first: Player, second: Player,
                 render_sink: Optional[RenderSink] = None,
                 board: Optional[Board] = None):
        """
        Initialize a game.

        Args:
            first: Player who moves first
            second: The other player
            render_sink: Callable receiving rendered board text (prints by default)
            board: Starting board, a new empty one if omitted
        """
        if Disc.EMPTY in (first.disc, second.disc):
            raise ValueError("Players must play a non-empty disc")
        if first.disc == second.disc:
            raise ValueError(f"Both players are playing {first.disc.name}")

        self.players = (first, second)
        self.current_player = first
        self.board = board if board is not None else Board()
        self.render_sink = render_sink or print_render
        self.outcome = IN_PROGRESS
        self.history: List[Tuple[str, int]] = []
        self.winning_line: List[Tuple[int, int]] = []
        self._started = False
        debug.debug(f"New game: {first} vs {second}", "game")

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    def render(self) -> None:
        self.render_sink(self.board.render())

    def _other(self, player: Player) -> Player:
        first, second = self.players
        return second if player is first else first

    def step(self) -> GameOutcome:
        """
        Play one turn.

        Returns:
            The outcome after the turn; a finished game is returned unchanged
        """
        if self.is_over:
            debug.debug("Game already finished, ignoring step", "game")
            return self.outcome

        if not self._started:
            self._started = True
            self.render()

        player = self.current_player
        while True:
            column = player.get_move(self.board)
            if self.board.place_disc(column, player.disc):
                break
            debug.warning(f"{player.name} chose unplayable column {column}, asking again", "game")

        self.history.append((player.name, column))
        debug.info(f"{player.name} dropped {player.disc.name} in column {column}", "game")
        self.render()

        debug.start_timer("win_check")
        won = check_win(self.board, player.disc)
        debug.end_timer("win_check", "game")

        if won:
            self.winning_line = find_winning_line(self.board, player.disc)
            self.outcome = GameOutcome(GameState.WON, player)
            debug.info(f"{player.name} wins after {len(self.history)} moves", "game")
        elif self.board.is_full():
            self.outcome = GameOutcome(GameState.DRAW)
            debug.info("Board is full, game is a draw", "game")
        else:
            self.current_player = self._other(player)

        return self.outcome

    def run(self) -> GameOutcome:
        """Play turns until the game is won or drawn."""
        while not self.is_over:
            self.step()
        return self.outcome
