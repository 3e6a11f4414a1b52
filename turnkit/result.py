"""Summary record for a finished match."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Self

from .color import PlayerColor
from .serialize import to_serializable


@dataclass(frozen=True)
class MatchResult:
    """Serializable summary of one completed match.

    ``outcome`` holds the game's own ``Outcome.to_dict()`` payload; ``winner``
    is lifted out of it so series can be aggregated without knowing the game.
    """

    game_id: str
    game_name: str
    seed: int
    winner: PlayerColor | None
    outcome: dict[str, Any]
    turns: int
    agents: dict[str, str] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)
    final_state_digest: str | None = None
    event_count: int = 0
    log_path: str | None = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def winning_agent(self) -> str | None:
        """Return the agent id seated at the winning color, if any."""
        if self.winner is None:
            return None
        return self.agents.get(self.winner.value)

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-ready result data; ``winner`` is a color string or ``None``."""
        return {
            "game_id": self.game_id,
            "game_name": self.game_name,
            "seed": self.seed,
            "winner": self.winner.value if self.winner is not None else None,
            "outcome": to_serializable(self.outcome),
            "turns": self.turns,
            "agents": dict(self.agents),
            "stats": to_serializable(self.stats),
            "final_state_digest": self.final_state_digest,
            "event_count": self.event_count,
            "log_path": self.log_path,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild a result from ``to_dict`` output."""
        winner = data.get("winner")
        return cls(
            game_id=str(data["game_id"]),
            game_name=str(data["game_name"]),
            seed=int(data["seed"]),
            winner=PlayerColor(winner) if winner is not None else None,
            outcome=dict(data.get("outcome", {})),
            turns=int(data.get("turns", 0)),
            agents={str(key): str(value) for key, value in data.get("agents", {}).items()},
            stats=dict(data.get("stats", {})),
            final_state_digest=data.get("final_state_digest"),
            event_count=int(data.get("event_count", 0)),
            log_path=data.get("log_path"),
        )
