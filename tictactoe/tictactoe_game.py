"""Tic-tac-toe game binding."""

from __future__ import annotations

from typing import Any

from turnkit.errors import MatchConfigurationError
from turnkit.game import Game, first_player_from_config

from .tictactoe_actions import BOARD_SIZE, Place
from .tictactoe_state import TicTacToeOutcome, TicTacToeState


class TicTacToeGame(Game[TicTacToeState, Place, TicTacToeOutcome]):
    """Classic 3x3 tic-tac-toe with BLACK playing X."""

    game_name = "tictactoe"
    state_type = TicTacToeState
    action_type = Place
    outcome_type = TicTacToeOutcome

    def start_state(self, config: dict[str, Any] | None = None) -> TicTacToeState:
        cfg = config or {}
        rows = cfg.get("rows")
        if rows is None:
            return TicTacToeState(to_move=first_player_from_config(cfg))
        rows = [str(row) for row in rows]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE or set(row) - set("XO.") for row in rows):
            raise MatchConfigurationError(
                f"rows must be {BOARD_SIZE} strings of {BOARD_SIZE} X/O/. cells, got {rows!r}."
            )
        return TicTacToeState.from_rows(rows)
