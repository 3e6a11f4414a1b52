"""Tic-tac-toe reference game."""

from .tictactoe_actions import BOARD_SIZE, Place
from .tictactoe_game import TicTacToeGame
from .tictactoe_state import LINES, TicTacToeOutcome, TicTacToeState

__all__ = [
    "BOARD_SIZE",
    "LINES",
    "Place",
    "TicTacToeGame",
    "TicTacToeOutcome",
    "TicTacToeState",
]
