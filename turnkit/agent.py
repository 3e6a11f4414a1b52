"""Agent interface used by the game runner."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

from .color import PlayerColor
from .events import MatchEvent

StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


class Agent(ABC, Generic[StateT, ActionT]):
    """Decision policy for one seat.

    Implementations may be stateless or keep memory across calls within a
    match. They must treat the state they are shown as read-only and must not
    keep a reference to it after ``pick_action`` returns.
    """

    def __init__(self, agent_id: str):
        self.agent_id = agent_id

    def reset(self, color: PlayerColor, seed: int) -> None:
        """Reset internal state before a new match."""

    @abstractmethod
    def pick_action(self, state: StateT, actions: Sequence[ActionT]) -> ActionT:
        """Return one element of ``actions`` to play in ``state``."""

    def on_game_end(self, outcome: Any, history: Sequence[MatchEvent]) -> None:
        """Optional callback invoked once the match has an outcome."""
