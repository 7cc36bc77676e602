"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation, win detection, players and
the game loop state machine.
"""

from connect_four.game.board import Board
from connect_four.game.win_detector import check_win, find_winning_line
from connect_four.game.players import (Player, MoveSource, MoveSourceExhausted,
                                       ScriptedMoveSource, RandomMoveSource)
from connect_four.game.game_loop import GameLoop, GameOutcome, GameState

__all__ = ['Board', 'check_win', 'find_winning_line', 'Player', 'MoveSource',
           'MoveSourceExhausted', 'ScriptedMoveSource', 'RandomMoveSource',
           'GameLoop', 'GameOutcome', 'GameState']
