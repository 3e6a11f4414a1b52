"""Terminal-driven agent for a human seat."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ..agent import Agent
from ..color import PlayerColor
from ..errors import AgentExecutionError
from ..serialize import canonical_json


class HumanCLIAgent(Agent[Any, Any]):
    """Prints the position and prompts for an action index."""

    def __init__(
        self,
        agent_id: str,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        super().__init__(agent_id=agent_id)
        self._input = input_fn
        self._output = output_fn
        self.color: PlayerColor | None = None

    def reset(self, color: PlayerColor, seed: int) -> None:
        self.color = color

    def pick_action(self, state: Any, actions: Sequence[Any]) -> Any:
        if not actions:
            raise AgentExecutionError(self.color, f"{self.agent_id}: no legal actions available.")

        seat = self.color.value if self.color is not None else "?"
        self._output(f"\n=== {seat} to move ===")
        self._output(canonical_json(state.to_dict() if hasattr(state, "to_dict") else state, indent=2))
        self._output("\n=== Legal actions ===")
        for index, action in enumerate(actions):
            payload = action.to_dict() if hasattr(action, "to_dict") else action
            self._output(f"[{index}] {canonical_json(payload)}")

        while True:
            raw = self._input("Choose action index: ").strip()
            try:
                choice = int(raw)
            except ValueError:
                self._output("Expected an integer index.")
                continue
            if 0 <= choice < len(actions):
                return actions[choice]
            self._output("Index out of range.")
