"""Random baseline agent."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Sequence

from ..agent import Agent
from ..color import PlayerColor
from ..errors import AgentExecutionError


class RandomAgent(Agent[Any, Any]):
    """Chooses uniformly among the legal actions."""

    def __init__(self, agent_id: str, seed: int | None = None):
        super().__init__(agent_id=agent_id)
        self._rng = random.Random(seed)
        self._fixed_seed = seed

    def reset(self, color: PlayerColor, seed: int) -> None:
        """Derive a per-match, per-seat RNG seed unless one was pinned at construction."""
        if self._fixed_seed is not None:
            self._rng.seed(self._fixed_seed)
            return
        material = f"{seed}:{self.agent_id}:{color.value}".encode("utf-8")
        derived_seed = int.from_bytes(hashlib.sha256(material).digest()[:8], byteorder="big", signed=False)
        self._rng.seed(derived_seed)

    def pick_action(self, state: Any, actions: Sequence[Any]) -> Any:
        if not actions:
            raise AgentExecutionError(None, f"{self.agent_id}: no legal actions available.")
        return self._rng.choice(list(actions))
