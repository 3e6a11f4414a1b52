"""Race-to-42 game binding."""

from __future__ import annotations

from typing import Any

from turnkit.errors import MatchConfigurationError
from turnkit.game import Game, first_player_from_config

from .race_actions import Bump
from .race_state import DEFAULT_TARGET, RaceOutcome, RaceState


class RaceGame(Game[RaceState, Bump, RaceOutcome]):
    """Two seats take turns bumping a counter by 2, 3 or 4 towards a target."""

    game_name = "race42"
    state_type = RaceState
    action_type = Bump
    outcome_type = RaceOutcome

    def __init__(self, default_config: dict[str, Any] | None = None):
        self.default_config = default_config or {}

    def start_state(self, config: dict[str, Any] | None = None) -> RaceState:
        cfg = dict(self.default_config)
        cfg.update(config or {})
        try:
            target = int(cfg.get("target", DEFAULT_TARGET))
            start = int(cfg.get("start", 0))
        except (TypeError, ValueError) as exc:
            raise MatchConfigurationError(f"target and start must be integers: {exc}") from exc
        if target < 0:
            raise MatchConfigurationError("target must be >= 0.")
        if start < 0:
            raise MatchConfigurationError("start must be >= 0.")
        return RaceState(count=start, to_move=first_player_from_config(cfg), target=target)
