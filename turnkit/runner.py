"""Turn loop driving two agents through a game to its outcome."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Any, Generic, Sequence, TypeVar
from uuid import uuid4

from .agent import Agent
from .color import PlayerColor
from .errors import (
    AgentExecutionError,
    IllegalActionError,
    MatchConfigurationError,
    NoLegalActionsError,
    TurnkitError,
    TurnLimitExceededError,
)
from .events import EventType, MatchEvent, write_jsonl
from .game import Game
from .result import MatchResult
from .serialize import to_serializable
from .state import State

StateT = TypeVar("StateT", bound=State[Any, Any])
ActionT = TypeVar("ActionT")
OutcomeT = TypeVar("OutcomeT")


@dataclass(frozen=True)
class RunnerConfig:
    """Runtime configuration for one match.

    ``max_turns=None`` keeps the loop unbounded; a game whose ``outcome()``
    never fires will then run forever.
    """

    max_turns: int | None = None
    validate_actions: bool = True
    isolate_state: bool = False
    event_log_dir: str | Path | None = None


@dataclass(frozen=True)
class MatchRun(Generic[StateT, OutcomeT]):
    """Everything a finished match produced."""

    outcome: OutcomeT
    state: StateT
    result: MatchResult
    events: list[MatchEvent]


class GameRunner(Generic[StateT, ActionT, OutcomeT]):
    """Owns two agents and a state and alternates turns until an outcome appears.

    A runner plays exactly one match: ``play()`` may only be called once.
    """

    def __init__(
        self,
        black_agent: Agent[StateT, ActionT],
        white_agent: Agent[StateT, ActionT],
        start_state: StateT,
        config: RunnerConfig | None = None,
        *,
        game: Game[Any, Any, Any] | None = None,
        game_id: str | None = None,
        seed: int = 0,
        log_path: str | Path | None = None,
    ):
        if black_agent is None or white_agent is None:
            raise MatchConfigurationError("GameRunner needs both a black and a white agent.")
        if start_state is None:
            raise MatchConfigurationError("GameRunner needs a start state.")
        self.config = config or RunnerConfig()
        self.game_name = game.game_name if game is not None else type(start_state).__name__
        self.game_id = game_id or f"{self.game_name}-{seed}-{uuid4().hex[:8]}"
        self.seed = seed
        self.log_path = log_path
        self._agents: dict[PlayerColor, Agent[StateT, ActionT]] = {
            PlayerColor.BLACK: black_agent,
            PlayerColor.WHITE: white_agent,
        }
        self._state = start_state
        self._played = False

    def agent_for(self, color: PlayerColor) -> Agent[StateT, ActionT]:
        """Return the agent seated at ``color``."""
        return self._agents[color]

    def play(self) -> MatchRun[StateT, OutcomeT]:
        """Run the match to completion and return its outcome and final state."""
        if self._played:
            raise MatchConfigurationError(f"Runner for {self.game_id} has already played its match.")
        self._played = True

        state = self._state
        history: list[MatchEvent] = [
            MatchEvent.create(
                event_type=EventType.MATCH_START,
                game_id=self.game_id,
                turn=0,
                payload={
                    "seed": self.seed,
                    "agents": self._agent_labels(),
                    "initial_state_digest": state.state_digest(),
                },
            )
        ]
        for color, agent in self._agents.items():
            agent.reset(color, self.seed)

        move_durations_ms: dict[PlayerColor, list[float]] = defaultdict(list)
        turn = 0

        while (outcome := state.outcome()) is None:
            if self.config.max_turns is not None and turn >= self.config.max_turns:
                raise self._abort(
                    history,
                    EventType.STATE_ERROR,
                    turn,
                    TurnLimitExceededError(self.config.max_turns),
                )

            color = state.current_player_turn()
            agent = self.agent_for(color)
            legal_actions = list(state.legal_actions())
            if not legal_actions:
                raise self._abort(
                    history,
                    EventType.STATE_ERROR,
                    turn,
                    NoLegalActionsError(color, state.state_digest()),
                )

            view = state.clone() if self.config.isolate_state else state
            start = perf_counter()
            try:
                action = agent.pick_action(view, legal_actions)
            except Exception as exc:
                error = AgentExecutionError(color, f"Agent {agent.agent_id!r} failed to pick an action: {exc}")
                raise self._abort(history, EventType.AGENT_ERROR, turn, error) from exc
            duration_ms = (perf_counter() - start) * 1000.0
            move_durations_ms[color].append(duration_ms)

            if self.config.validate_actions and action not in legal_actions:
                raise self._abort(
                    history,
                    EventType.ILLEGAL_ACTION,
                    turn,
                    IllegalActionError(color, action, "not among the offered legal actions"),
                )

            try:
                state.make_next(action)
            except Exception as exc:
                self._record_error(history, EventType.STATE_ERROR, turn, _error_payload(exc))
                raise
            turn += 1
            history.append(
                MatchEvent.create(
                    event_type=EventType.TURN,
                    game_id=self.game_id,
                    turn=turn,
                    payload={
                        "color": color.value,
                        "agent_id": agent.agent_id,
                        "action": _payload(action),
                        "legal_action_count": len(legal_actions),
                        "state_digest": state.state_digest(),
                        "duration_ms": duration_ms,
                    },
                )
            )

        result = self._build_result(outcome, state, turn, move_durations_ms, event_count=len(history) + 1)
        history.append(
            MatchEvent.create(
                event_type=EventType.TERMINAL,
                game_id=self.game_id,
                turn=turn,
                payload={"result": result.to_dict()},
            )
        )
        self._write_log(history)
        for agent in self._agents.values():
            agent.on_game_end(outcome, history)
        return MatchRun(outcome=outcome, state=state, result=result, events=history)

    def _abort(self, history: list[MatchEvent], event_type: EventType, turn: int, error: TurnkitError) -> TurnkitError:
        self._record_error(history, event_type, turn, error.to_dict())
        return error

    def _record_error(
        self,
        history: list[MatchEvent],
        event_type: EventType,
        turn: int,
        error: dict[str, Any],
    ) -> None:
        history.append(
            MatchEvent.create(
                event_type=event_type,
                game_id=self.game_id,
                turn=turn,
                payload={"error": error},
            )
        )
        self._write_log(history)

    def _build_result(
        self,
        outcome: Any,
        state: StateT,
        turn: int,
        move_durations_ms: dict[PlayerColor, list[float]],
        *,
        event_count: int,
    ) -> MatchResult:
        winner = outcome.winner() if hasattr(outcome, "winner") else None
        log_path = self._resolve_log_path()
        return MatchResult(
            game_id=self.game_id,
            game_name=self.game_name,
            seed=self.seed,
            winner=winner,
            outcome=_payload(outcome),
            turns=turn,
            agents=self._agent_labels(),
            stats={"move_durations_ms": self._durations_by_color(move_durations_ms)},
            final_state_digest=state.state_digest(),
            event_count=event_count,
            log_path=str(log_path) if log_path is not None else None,
        )

    def _durations_by_color(self, move_durations_ms: dict[PlayerColor, list[float]]) -> dict[str, Sequence[float]]:
        return {color.value: list(durations) for color, durations in sorted(move_durations_ms.items())}

    def _agent_labels(self) -> dict[str, str]:
        return {color.value: agent.agent_id for color, agent in self._agents.items()}

    def _resolve_log_path(self) -> Path | None:
        if self.log_path is not None:
            return Path(self.log_path)
        if self.config.event_log_dir is None:
            return None
        return Path(self.config.event_log_dir) / f"{self.game_id}.jsonl"

    def _write_log(self, history: list[MatchEvent]) -> None:
        path = self._resolve_log_path()
        if path is not None:
            write_jsonl(path, history)


def _payload(value: Any) -> Any:
    if hasattr(value, "to_dict") and callable(value.to_dict):
        return to_serializable(value.to_dict())
    return to_serializable(value)


def _error_payload(exc: BaseException) -> dict[str, Any]:
    """Describe a non-framework exception the way ``TurnkitError.to_dict`` does."""
    return {"type": exc.__class__.__name__, "message": str(exc)}
