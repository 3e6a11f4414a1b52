"""Pydantic models validating match and series configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from .runner import RunnerConfig

AgentKind = Literal["first", "random", "human"]


class AgentSpec(BaseModel):
    """Which baseline agent to seat, e.g. ``"random"`` or ``{"kind": "random", "seed": 3}``."""

    kind: AgentKind = "random"
    agent_id: str | None = None
    seed: int | None = None

    def label(self, fallback: str) -> str:
        return self.agent_id or f"{self.kind}-{fallback}"


class SeriesRequest(BaseModel):
    """A batch of matches between two seated agents."""

    game: str = "race42"
    black: AgentSpec = Field(default_factory=AgentSpec)
    white: AgentSpec = Field(default_factory=AgentSpec)
    num_games: int = Field(default=1, ge=1)
    seed: int = 0
    swap_seats: bool = False
    max_turns: int | None = Field(default=None, ge=1)
    validate_actions: bool = True
    log_dir: str | None = None
    game_config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("black", "white", mode="before")
    @classmethod
    def _coerce_agent(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"kind": value.strip().lower()}
        return value

    @field_validator("game")
    @classmethod
    def _normalize_game(cls, value: str) -> str:
        return value.strip().lower()

    def seeds(self) -> list[int]:
        return [self.seed + offset for offset in range(self.num_games)]

    def runner_config(self) -> RunnerConfig:
        return RunnerConfig(
            max_turns=self.max_turns,
            validate_actions=self.validate_actions,
            event_log_dir=Path(self.log_dir) if self.log_dir is not None else None,
        )
