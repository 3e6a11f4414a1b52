"""State-machine contract for game positions."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Generic, Self, Sequence, TypeVar

from .color import PlayerColor
from .serialize import digest, public_fields

ActionT = TypeVar("ActionT")
OutcomeT = TypeVar("OutcomeT")


class State(ABC, Generic[ActionT, OutcomeT]):
    """A complete, self-contained game position.

    ``outcome()`` is the only termination signal: it returns ``None`` while the
    game is undecided and an outcome value once it is over. Whenever it returns
    ``None``, ``legal_actions()`` must be non-empty.
    """

    @abstractmethod
    def make_next(self, action: ActionT) -> None:
        """Apply ``action`` to this state in place.

        ``action`` must be one that ``legal_actions()`` currently enumerates.
        What happens otherwise is up to the concrete game.
        """

    @abstractmethod
    def legal_actions(self) -> Sequence[ActionT]:
        """Return every action applicable to this state."""

    @abstractmethod
    def current_player_turn(self) -> PlayerColor:
        """Return the seat that acts next."""

    @abstractmethod
    def outcome(self) -> OutcomeT | None:
        """Return the result once the game is decided, otherwise ``None``."""

    def next(self, action: ActionT) -> Self:
        """Return the state reached by ``action``, leaving this one untouched."""
        successor = self.clone()
        successor.make_next(action)
        return successor

    def clone(self) -> Self:
        """Return an independent copy of this state."""
        return copy.deepcopy(self)

    def is_terminal(self) -> bool:
        """Return whether ``outcome()`` currently reports a result."""
        return self.outcome() is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the public fields."""
        return public_fields(self)

    def state_digest(self) -> str:
        """Return a deterministic digest for event logs."""
        return digest(self.to_dict())
