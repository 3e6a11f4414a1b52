"""State and outcome for the race-to-42 counter game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from turnkit.color import PlayerColor
from turnkit.outcome import Outcome
from turnkit.state import State

from .race_actions import BUMP_SIZES, Bump

DEFAULT_TARGET = 42


class RaceOutcome(Outcome, Enum):
    """How a race ended."""

    BLACK_WINS = "BLACK_WINS"
    WHITE_WINS = "WHITE_WINS"
    BOTH_LOSE = "BOTH_LOSE"

    def is_final(self) -> bool:
        return True

    def winner(self) -> PlayerColor | None:
        if self is RaceOutcome.BLACK_WINS:
            return PlayerColor.BLACK
        if self is RaceOutcome.WHITE_WINS:
            return PlayerColor.WHITE
        return None

    @classmethod
    def win_for(cls, color: PlayerColor) -> RaceOutcome:
        return cls.BLACK_WINS if color is PlayerColor.BLACK else cls.WHITE_WINS


@dataclass
class RaceState(State[Bump, RaceOutcome]):
    """Shared counter; whoever lands exactly on ``target`` wins, overshooting sinks both."""

    count: int = 0
    to_move: PlayerColor = PlayerColor.BLACK
    last_mover: PlayerColor | None = None
    target: int = DEFAULT_TARGET

    def make_next(self, action: Bump) -> None:
        self.count += action.amount
        self.last_mover = self.to_move
        self.to_move = self.to_move.opponent()

    def legal_actions(self) -> list[Bump]:
        if self.outcome() is not None:
            return []
        return [Bump(amount) for amount in BUMP_SIZES]

    def current_player_turn(self) -> PlayerColor:
        return self.to_move

    def outcome(self) -> RaceOutcome | None:
        if self.count < self.target:
            return None
        if self.count > self.target:
            return RaceOutcome.BOTH_LOSE
        # A state built directly at the target has no mover; credit the seat to play.
        return RaceOutcome.win_for(self.last_mover or self.to_move)
