"""Deterministic agent that always plays the first offered action."""

from __future__ import annotations

from typing import Any, Sequence

from ..agent import Agent
from ..errors import AgentExecutionError


class FirstActionAgent(Agent[Any, Any]):
    """Picks ``actions[0]``; useful as a fixed baseline and in tests."""

    def pick_action(self, state: Any, actions: Sequence[Any]) -> Any:
        if not actions:
            raise AgentExecutionError(None, f"{self.agent_id}: no legal actions available.")
        return actions[0]
