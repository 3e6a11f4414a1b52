"""Match events: the runner's log, one JSON object per line."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from time import time
from typing import Any, Iterable, Iterator, Mapping

from .serialize import canonical_json, to_serializable


class EventType(str, Enum):
    """What happened at one point of a match."""

    MATCH_START = "match_start"
    TURN = "turn"
    ILLEGAL_ACTION = "illegal_action"
    STATE_ERROR = "state_error"
    AGENT_ERROR = "agent_error"
    TERMINAL = "terminal"

    @property
    def is_error(self) -> bool:
        """True for the event types that end a match abnormally."""
        return self in (EventType.ILLEGAL_ACTION, EventType.STATE_ERROR, EventType.AGENT_ERROR)


@dataclass(frozen=True)
class MatchEvent:
    """One line of a match log.

    ``turn`` counts the actions applied so far, so an error raised while
    the third action is being chosen or applied carries ``turn=2``.
    """

    event_type: EventType
    game_id: str
    turn: int
    timestamp_ms: int = field(default_factory=lambda: int(time() * 1000))
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        event_type: EventType,
        game_id: str,
        turn: int,
        payload: dict[str, Any] | None = None,
    ) -> MatchEvent:
        """Stamp a new event with the current wall-clock time."""
        return cls(event_type=event_type, game_id=game_id, turn=turn, payload=payload or {})

    @property
    def is_error(self) -> bool:
        return self.event_type.is_error

    def to_dict(self) -> dict[str, Any]:
        """Flatten to JSON primitives; the event type is written as its string value."""
        return {
            "event_type": self.event_type.value,
            "game_id": self.game_id,
            "turn": self.turn,
            "timestamp_ms": self.timestamp_ms,
            "payload": to_serializable(self.payload),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchEvent:
        """Rebuild an event from ``to_dict`` output; a missing payload reads as empty."""
        return cls(
            event_type=EventType(data["event_type"]),
            game_id=str(data["game_id"]),
            turn=int(data["turn"]),
            timestamp_ms=int(data["timestamp_ms"]),
            payload=dict(data.get("payload") or {}),
        )


def write_jsonl(path: str | Path, events: Iterable[MatchEvent]) -> None:
    """Replace ``path`` with one line per event, creating parent directories."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    lines = [canonical_json(event.to_dict()) + "\n" for event in events]
    output_path.write_text("".join(lines), encoding="utf-8")


def iter_jsonl(path: str | Path) -> Iterator[MatchEvent]:
    """Yield events from a log written by ``write_jsonl``, skipping blank lines."""
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield MatchEvent.from_dict(json.loads(line))


def read_jsonl(path: str | Path) -> list[MatchEvent]:
    return list(iter_jsonl(path))
