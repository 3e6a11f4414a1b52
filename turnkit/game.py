"""Game binding tying one state, action and outcome type together."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Mapping, TypeVar

from .action import Action
from .color import PlayerColor
from .errors import MatchConfigurationError
from .outcome import Outcome
from .state import State

StateT = TypeVar("StateT", bound=State[Any, Any])
ActionT = TypeVar("ActionT", bound=Action)
OutcomeT = TypeVar("OutcomeT", bound=Outcome)


class Game(Generic[StateT, ActionT, OutcomeT]):
    """Type-level grouping of the three cooperating types of one concrete game.

    Agents and runners are written against ``Game[StateT, ActionT, OutcomeT]``
    once and work for every game that declares its binding, e.g.::

        class TicTacToe(Game[TicTacToeState, Place, TicTacToeOutcome]):
            game_name = "tictactoe"
            state_type = TicTacToeState
            action_type = Place
            outcome_type = TicTacToeOutcome
    """

    game_name: ClassVar[str] = "game"
    state_type: ClassVar[type[State[Any, Any]]]
    action_type: ClassVar[type[Action]]
    outcome_type: ClassVar[type[Outcome]]

    def start_state(self, config: dict[str, Any] | None = None) -> StateT:
        """Build the initial position for a new match."""
        raise NotImplementedError(f"{self.__class__.__name__} does not implement start_state().")

    def parse_action(self, data: Mapping[str, Any]) -> ActionT:
        """Parse an action payload produced by ``Action.to_dict``."""
        return self.action_type.from_dict(data)  # type: ignore[return-value]


def first_player_from_config(config: Mapping[str, Any], key: str = "first_player") -> PlayerColor:
    """Read the opening seat from a game config, defaulting to BLACK."""
    raw = config.get(key, PlayerColor.BLACK.value)
    try:
        return PlayerColor(str(raw).upper())
    except ValueError as exc:
        raise MatchConfigurationError(f"{key} must be BLACK or WHITE, got {raw!r}.") from exc
