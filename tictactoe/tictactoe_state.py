"""Board state and outcome for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from turnkit.color import PlayerColor
from turnkit.outcome import Outcome
from turnkit.state import State

from .tictactoe_actions import BOARD_SIZE, Place

LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((row, col) for col in range(BOARD_SIZE)) for row in range(BOARD_SIZE)),
    *(tuple((row, col) for row in range(BOARD_SIZE)) for col in range(BOARD_SIZE)),
    tuple((index, index) for index in range(BOARD_SIZE)),
    tuple((index, BOARD_SIZE - 1 - index) for index in range(BOARD_SIZE)),
)


class TicTacToeOutcome(Outcome, Enum):
    """Final result of a tic-tac-toe game."""

    BLACK_WINS = "BLACK_WINS"
    WHITE_WINS = "WHITE_WINS"
    DRAW = "DRAW"

    def is_final(self) -> bool:
        return True

    def winner(self) -> PlayerColor | None:
        return {
            TicTacToeOutcome.BLACK_WINS: PlayerColor.BLACK,
            TicTacToeOutcome.WHITE_WINS: PlayerColor.WHITE,
        }.get(self)


def _empty_board() -> list[list[PlayerColor | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class TicTacToeState(State[Place, TicTacToeOutcome]):
    """Mutable 3x3 board. BLACK moves first."""

    board: list[list[PlayerColor | None]] = field(default_factory=_empty_board)
    to_move: PlayerColor = PlayerColor.BLACK

    def make_next(self, action: Place) -> None:
        if self.board[action.row][action.col] is not None:
            raise ValueError(f"Cell ({action.row}, {action.col}) is already taken.")
        self.board[action.row][action.col] = self.to_move
        self.to_move = self.to_move.opponent()

    def legal_actions(self) -> list[Place]:
        if self.outcome() is not None:
            return []
        return [
            Place(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.board[row][col] is None
        ]

    def current_player_turn(self) -> PlayerColor:
        return self.to_move

    def outcome(self) -> TicTacToeOutcome | None:
        for line in LINES:
            owners = {self.board[row][col] for row, col in line}
            if len(owners) == 1:
                (owner,) = owners
                if owner is PlayerColor.BLACK:
                    return TicTacToeOutcome.BLACK_WINS
                if owner is PlayerColor.WHITE:
                    return TicTacToeOutcome.WHITE_WINS
        if all(cell is not None for row in self.board for cell in row):
            return TicTacToeOutcome.DRAW
        return None

    def render(self) -> str:
        symbols = {PlayerColor.BLACK: "X", PlayerColor.WHITE: "O", None: "."}
        return "\n".join("".join(symbols[cell] for cell in row) for row in self.board)

    @classmethod
    def from_rows(cls, rows: list[str], to_move: PlayerColor | None = None) -> TicTacToeState:
        """Build a board from strings such as ``["XO.", "...", "..."]``."""
        symbols = {"X": PlayerColor.BLACK, "O": PlayerColor.WHITE, ".": None}
        board = [[symbols[char] for char in row] for row in rows]
        if to_move is None:
            placed = sum(cell is not None for row in board for cell in row)
            to_move = PlayerColor.BLACK if placed % 2 == 0 else PlayerColor.WHITE
        return cls(board=board, to_move=to_move)
