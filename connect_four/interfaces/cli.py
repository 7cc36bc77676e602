"""
cli.py - Command-line interface for Connect Four

This module provides the console move source, the play session with its replay
prompt, and two helper commands: simulate (play a scripted game) and show
(render a position and report any four-in-a-row).
"""

import argparse
from typing import List, Optional

from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.game.game_loop import GameLoop, GameOutcome, GameState
from connect_four.game.players import Player, ScriptedMoveSource, MoveSourceExhausted
from connect_four.game.win_detector import find_winning_line
from connect_four.utils import COLS, Disc

NO_ROOM_MESSAGE = "No Room! Try a different column."
REPLAY_ANSWERS = {'y': True, 'yes': True, 'n': False, 'no': False}


class ConsoleMoveSource:
    """Reads 1-based column numbers from the console until a playable one is entered."""

    def __init__(self, name: str):
        self.name = name

    def get_move(self, board: Board) -> int:
        """
        Prompt for a column.

        Returns:
            A 0-based column that is valid on the board
        """
        prompt = f"{self.name}, enter your move (1-{COLS}): "
        while True:
            user_input = input(prompt).strip()
            try:
                column = int(user_input) - 1
            except ValueError:
                column = -1

            if not 0 <= column < COLS:
                debug.debug(f"Rejected input {user_input!r} from {self.name}", "cli")
                prompt = f"No Available Move. Enter a number between 1 and {COLS}: "
                continue

            if not board.is_column_valid(column):
                print(NO_ROOM_MESSAGE)
                prompt = f"{self.name}, enter your move (1-{COLS}): "
                continue

            return column


def parse_moves(moves_str: str) -> List[int]:
    """Parse a comma-separated list of 0-based columns."""
    try:
        return [int(move) for move in moves_str.split(',') if move.strip()]
    except ValueError:
        raise ValueError(f"Moves must be comma-separated integers, got {moves_str!r}")


class ConnectFourCLI:
    """Console front end: owns sessions, creating a fresh game for each one."""

    def __init__(self):
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four for two players')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug-level debug)')
        parser.add_argument('--debug-level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning',
                            help='Logging verbosity (default: warning)')
        parser.add_argument('--log-file', type=str, help='Also write log records to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play',
                                            help='Play an interactive two-player game')
        play_parser.add_argument('--red-name', default='Player 1', help='Name of the Red player')
        play_parser.add_argument('--yellow-name', default='Player 2', help='Name of the Yellow player')

        simulate_parser = subparsers.add_parser('simulate',
                                                help='Play a scripted game')
        simulate_parser.add_argument('--moves', required=True,
                                     help='Comma-separated 0-based columns, Red first (e.g. "3,2,3,2")')

        show_parser = subparsers.add_parser('show',
                                            help='Render a position and check it for wins')
        show_parser.add_argument('--rows', nargs='+', required=True,
                                 help='Six rows of glyphs (. R Y), top row first')

        self.args = parser.parse_args(argv)
        self.configure_debug()

    def configure_debug(self) -> None:
        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the parsed command and return an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'simulate':
            return self.simulate()
        elif self.args.command == 'show':
            return self.show_position()
        return self.play_session()

    def make_players(self) -> List[Player]:
        red_name = getattr(self.args, 'red_name', 'Player 1')
        yellow_name = getattr(self.args, 'yellow_name', 'Player 2')
        return [
            Player(red_name, Disc.RED, ConsoleMoveSource(red_name)),
            Player(yellow_name, Disc.YELLOW, ConsoleMoveSource(yellow_name)),
        ]

    def play_session(self) -> int:
        """Play games until the players decline a rematch."""
        print("Welcome to Connect Four!")
        print(f"Take turns dropping discs into columns 1-{COLS}. "
              "Four in a row horizontally, vertically or diagonally wins.")

        games_played = 0
        while True:
            first, second = self.make_players()
            game = GameLoop(first, second)
            outcome = game.run()
            games_played += 1
            debug.info(f"Game {games_played} finished: {outcome.state.name}", "cli")
            self.report_outcome(outcome)

            if not self.prompt_replay():
                print("Thanks for playing!")
                return 0

    def report_outcome(self, outcome: GameOutcome) -> None:
        if outcome.state == GameState.WON:
            print(f"{outcome.winner.name} is WINNER!")
        elif outcome.state == GameState.DRAW:
            print("It's a draw!")

    def prompt_replay(self) -> bool:
        """Ask whether to play again until a yes or no answer is given."""
        while True:
            answer = input("Play again? (y/n): ").strip().lower()
            if answer in REPLAY_ANSWERS:
                return REPLAY_ANSWERS[answer]
            print("Please answer y or n.")

    def simulate(self) -> int:
        """Play a game from a list of columns, alternating Red and Yellow."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            print(f"Error: {e}")
            return 2

        script = ScriptedMoveSource(moves)
        game = GameLoop(Player('Red', Disc.RED, script), Player('Yellow', Disc.YELLOW, script))
        try:
            outcome = game.run()
        except MoveSourceExhausted:
            print(f"Script ended after {len(game.history)} moves with the game still in progress.")
            return 1

        self.report_outcome(outcome)
        if script.remaining:
            print(f"Ignored {script.remaining} moves after the game ended.")
        return 0

    def show_position(self) -> int:
        """Render a position given as rows of glyphs and report four-in-a-rows."""
        try:
            board = Board.from_rows(self.args.rows)
        except ValueError as e:
            print(f"Error: {e}")
            return 2

        print(board.render(), end="")
        found = False
        for disc in (Disc.RED, Disc.YELLOW):
            line = find_winning_line(board, disc)
            if line:
                found = True
                print(f"{disc.label} has four in a row: {line}")
        if not found:
            print("No four in a row.")
        if board.is_full():
            print("The board is full.")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = ConnectFourCLI()
    cli.parse_args(argv)
    try:
        return cli.run()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
