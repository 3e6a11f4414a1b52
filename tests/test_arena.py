"""Tests for series orchestration, configuration schemas, and the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from race42.race_game import RaceGame
from tictactoe.tictactoe_game import TicTacToeGame
from turnkit.agents.first_action_agent import FirstActionAgent
from turnkit.arena import Arena, main
from turnkit.color import PlayerColor
from turnkit.errors import MatchConfigurationError
from turnkit.registry import game_factory
from turnkit.schemas import AgentSpec, SeriesRequest


def test_series_counts_wins_by_color_and_agent() -> None:
    arena = Arena()

    summary = arena.run_series(
        game_factory=RaceGame,
        black_factory=lambda: FirstActionAgent("alpha"),
        white_factory=lambda: FirstActionAgent("beta"),
        seeds=[0, 1, 2],
    )

    assert len(summary.results) == 3
    assert summary.wins_by_color == {"BLACK": 3}
    assert summary.wins_by_agent == {"alpha": 3}
    assert summary.win_rates == {"alpha": 1.0}
    assert summary.draws == 0
    assert all(result.game_name == "race42" for result in summary.results)


def test_series_can_swap_seats_between_matches() -> None:
    summary = Arena().run_series(
        game_factory=RaceGame,
        black_factory=lambda: FirstActionAgent("alpha"),
        white_factory=lambda: FirstActionAgent("beta"),
        seeds=[0, 1, 2],
        swap_seats=True,
    )

    assert summary.wins_by_agent == {"alpha": 2, "beta": 1}
    assert summary.results[1].agents == {"BLACK": "beta", "WHITE": "alpha"}


def test_arena_remembers_last_match_events() -> None:
    arena = Arena()
    run = arena.run_match(TicTacToeGame(), FirstActionAgent("a"), FirstActionAgent("b"), seed=1)

    assert arena.last_events == run.events
    assert run.result.winner is PlayerColor.BLACK


def test_series_request_coerces_agent_shorthand() -> None:
    request = SeriesRequest.model_validate({"game": " TicTacToe ", "black": "First", "num_games": 3, "seed": 10})

    assert request.game == "tictactoe"
    assert request.black == AgentSpec(kind="first")
    assert request.white.kind == "random"
    assert request.seeds() == [10, 11, 12]
    assert request.runner_config().max_turns is None


def test_series_request_rejects_bad_values() -> None:
    with pytest.raises(ValidationError):
        SeriesRequest.model_validate({"black": "minimax"})
    with pytest.raises(ValidationError):
        SeriesRequest.model_validate({"num_games": 0})


def test_unknown_game_is_a_configuration_error() -> None:
    with pytest.raises(MatchConfigurationError):
        game_factory("chess")


def test_cli_prints_summary_and_writes_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "out" / "summary.json"
    log_dir = tmp_path / "logs"

    exit_code = main(
        [
            "--game",
            "race42",
            "--black",
            "first",
            "--white",
            "first",
            "--num-games",
            "2",
            "--log-dir",
            str(log_dir),
            "--output",
            str(output),
        ]
    )

    printed = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert printed["wins_by_color"] == {"BLACK": 2}
    assert printed["wins_by_agent"] == {"first-black": 2}
    assert json.loads(output.read_text(encoding="utf-8")) == printed
    assert len(list(log_dir.glob("*.jsonl"))) == 2


def test_cli_reads_a_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "series.json"
    config_path.write_text(
        json.dumps({"game": "tictactoe", "black": {"kind": "first"}, "white": "first", "num_games": 1}),
        encoding="utf-8",
    )

    assert main(["--config", str(config_path)]) == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed["results"][0]["turns"] == 7
    assert printed["results"][0]["outcome"]["value"] == "BLACK_WINS"


def test_cli_rejects_invalid_requests() -> None:
    with pytest.raises(SystemExit):
        main(["--num-games", "0"])
    with pytest.raises(SystemExit):
        main(["--game", "chess"])


@pytest.mark.parametrize(
    "request_body",
    [
        {"game": "race42", "game_config": {"target": -1}},
        {"game": "race42", "game_config": {"first_player": "red"}},
        {"game": "tictactoe", "game_config": {"rows": ["XX", "...", "..."]}},
    ],
)
def test_cli_rejects_bad_game_config(tmp_path: Path, request_body: dict[str, object]) -> None:
    config_path = tmp_path / "series.json"
    config_path.write_text(json.dumps(request_body), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(config_path)])

    assert excinfo.value.code == 2


def test_cli_rejects_unreadable_config(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["--config", str(broken)])
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "missing.json")])
