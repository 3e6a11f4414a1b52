"""Arena orchestration for single matches and seat-swapped series."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

from pydantic import ValidationError

from .agent import Agent
from .errors import MatchConfigurationError
from .events import MatchEvent
from .game import Game
from .registry import create_agent, game_factory
from .result import MatchResult
from .runner import GameRunner, MatchRun, RunnerConfig
from .schemas import SeriesRequest
from .serialize import canonical_json

AgentFactory = Callable[[], Agent[Any, Any]]


@dataclass(frozen=True)
class ArenaSummary:
    """Aggregated output from a set of matches."""

    results: list[MatchResult]
    wins_by_color: dict[str, int]
    wins_by_agent: dict[str, int]
    win_rates: dict[str, float]
    draws: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable form of the summary."""
        return {
            "results": [result.to_dict() for result in self.results],
            "wins_by_color": dict(self.wins_by_color),
            "wins_by_agent": dict(self.wins_by_agent),
            "win_rates": dict(self.win_rates),
            "draws": self.draws,
        }


class Arena:
    """Runs many matches of one game and aggregates their results."""

    def __init__(self, config: RunnerConfig | None = None):
        self.config = config or RunnerConfig()
        self.last_events: list[MatchEvent] = []

    def run_match(
        self,
        game: Game[Any, Any, Any],
        black_agent: Agent[Any, Any],
        white_agent: Agent[Any, Any],
        seed: int = 0,
        game_config: dict[str, Any] | None = None,
        *,
        game_id: str | None = None,
        log_path: str | Path | None = None,
    ) -> MatchRun[Any, Any]:
        """Play one match from the game's start state."""
        runner: GameRunner[Any, Any, Any] = GameRunner(
            black_agent,
            white_agent,
            game.start_state(game_config),
            self.config,
            game=game,
            game_id=game_id,
            seed=seed,
            log_path=log_path,
        )
        run = runner.play()
        self.last_events = run.events
        return run

    def run_series(
        self,
        game_factory: Callable[[], Game[Any, Any, Any]],
        black_factory: AgentFactory,
        white_factory: AgentFactory,
        seeds: Sequence[int],
        game_config: dict[str, Any] | None = None,
        *,
        swap_seats: bool = False,
    ) -> ArenaSummary:
        """Run one match per seed; with ``swap_seats`` every other match swaps colors."""
        results: list[MatchResult] = []
        for index, seed in enumerate(seeds):
            black, white = black_factory(), white_factory()
            if swap_seats and index % 2 == 1:
                black, white = white, black
            run = self.run_match(game_factory(), black, white, seed=seed, game_config=game_config)
            results.append(run.result)
        return self._summarize_results(results)

    def _summarize_results(self, results: Sequence[MatchResult]) -> ArenaSummary:
        wins_by_color: dict[str, int] = {}
        wins_by_agent: dict[str, int] = {}
        draws = 0
        for result in results:
            if result.winner is None:
                draws += 1
                continue
            wins_by_color[result.winner.value] = wins_by_color.get(result.winner.value, 0) + 1
            agent_id = result.winning_agent()
            if agent_id is not None:
                wins_by_agent[agent_id] = wins_by_agent.get(agent_id, 0) + 1
        total = len(results) if results else 1
        win_rates = {agent_id: count / total for agent_id, count in wins_by_agent.items()}
        return ArenaSummary(
            results=list(results),
            wins_by_color=wins_by_color,
            wins_by_agent=wins_by_agent,
            win_rates=win_rates,
            draws=draws,
        )


def run_request(request: SeriesRequest) -> ArenaSummary:
    """Run the series described by a validated ``SeriesRequest``."""
    factory = game_factory(request.game)
    black_id = request.black.label("black")
    white_id = request.white.label("white")
    if black_id == white_id:
        white_id = f"{white_id}-2"
    arena = Arena(request.runner_config())
    return arena.run_series(
        game_factory=factory,
        black_factory=lambda: create_agent(request.black, black_id),
        white_factory=lambda: create_agent(request.white, white_id),
        seeds=request.seeds(),
        game_config=request.game_config,
        swap_seats=request.swap_seats,
    )


def _load_request(args: argparse.Namespace) -> SeriesRequest:
    payload: dict[str, Any] = {}
    if args.config:
        try:
            payload.update(json.loads(Path(args.config).read_text(encoding="utf-8")))
        except (OSError, ValueError) as exc:
            raise MatchConfigurationError(f"Cannot read config {args.config}: {exc}") from exc
    overrides = {
        "game": args.game,
        "black": args.black,
        "white": args.white,
        "num_games": args.num_games,
        "seed": args.seed,
        "max_turns": args.max_turns,
        "log_dir": args.log_dir,
    }
    payload.update({key: value for key, value in overrides.items() if value is not None})
    if args.swap_seats:
        payload["swap_seats"] = True
    return SeriesRequest.model_validate(payload)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for batch match execution."""
    parser = argparse.ArgumentParser(description="Run two-player matches between baseline agents.")
    parser.add_argument("--config", type=str, default=None, help="JSON file holding a series request.")
    parser.add_argument("--game", type=str, default=None)
    parser.add_argument("--black", type=str, default=None, help="first | random | human")
    parser.add_argument("--white", type=str, default=None, help="first | random | human")
    parser.add_argument("--num-games", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-turns", type=int, default=None)
    parser.add_argument("--swap-seats", action="store_true")
    parser.add_argument("--log-dir", type=str, default=None)
    parser.add_argument("--output", type=str, default=None)
    args = parser.parse_args(argv)

    try:
        request = _load_request(args)
        summary = run_request(request)
    except (ValidationError, MatchConfigurationError) as exc:
        parser.error(str(exc))

    summary_json = canonical_json(summary.to_dict(), indent=2)
    print(summary_json)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(summary_json, encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
