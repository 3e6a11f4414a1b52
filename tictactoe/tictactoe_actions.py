"""Actions for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass

from turnkit.action import Action

BOARD_SIZE = 3


@dataclass(frozen=True)
class Place(Action):
    """Claim the empty cell at ``(row, col)``."""

    row: int
    col: int
    action_type = "Place"

    def __post_init__(self) -> None:
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise ValueError(f"Place({self.row}, {self.col}) is off the {BOARD_SIZE}x{BOARD_SIZE} board.")
