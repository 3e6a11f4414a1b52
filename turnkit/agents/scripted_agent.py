"""Agents driven by a callable policy or a fixed list of actions."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ..agent import Agent
from ..color import PlayerColor
from ..errors import AgentExecutionError, MatchConfigurationError

Policy = Callable[[Any, Sequence[Any]], Any]


class ScriptedAgent(Agent[Any, Any]):
    """Plays ``policy(state, actions)``, or replays ``script`` one action per turn.

    A script is rewound by ``reset`` so the same agent can replay it in
    every match. Running past its end raises ``AgentExecutionError``.
    """

    def __init__(self, agent_id: str, policy: Policy | None = None, *, script: Sequence[Any] | None = None):
        if (policy is None) == (script is None):
            raise MatchConfigurationError("ScriptedAgent takes exactly one of policy or script.")
        super().__init__(agent_id=agent_id)
        self.policy = policy
        self.script = list(script) if script is not None else None
        self._cursor = 0

    def reset(self, color: PlayerColor, seed: int) -> None:
        self._cursor = 0

    def pick_action(self, state: Any, actions: Sequence[Any]) -> Any:
        if self.policy is not None:
            return self.policy(state, actions)
        assert self.script is not None
        if self._cursor >= len(self.script):
            raise AgentExecutionError(None, f"Script of {self.agent_id!r} ran out after {len(self.script)} actions.")
        action = self.script[self._cursor]
        self._cursor += 1
        return action
