"""Name lookups for the games and baseline agents the CLI can build."""

from __future__ import annotations

from typing import Any, Callable

from .agent import Agent
from .errors import MatchConfigurationError
from .game import Game
from .schemas import AgentSpec


def _race42() -> Game[Any, Any, Any]:
    from race42.race_game import RaceGame

    return RaceGame()


def _tictactoe() -> Game[Any, Any, Any]:
    from tictactoe.tictactoe_game import TicTacToeGame

    return TicTacToeGame()


GAME_FACTORIES: dict[str, Callable[[], Game[Any, Any, Any]]] = {
    "race42": _race42,
    "tictactoe": _tictactoe,
}


def game_factory(name: str) -> Callable[[], Game[Any, Any, Any]]:
    """Return the zero-argument factory registered under ``name``."""
    normalized = name.strip().lower()
    if normalized not in GAME_FACTORIES:
        raise MatchConfigurationError(f"Unsupported game {name!r}. Supported games: {sorted(GAME_FACTORIES)}")
    return GAME_FACTORIES[normalized]


def create_agent(spec: AgentSpec, agent_id: str) -> Agent[Any, Any]:
    """Instantiate the baseline agent described by ``spec``."""
    from .agents import FirstActionAgent, HumanCLIAgent, RandomAgent

    if spec.kind == "first":
        return FirstActionAgent(agent_id)
    if spec.kind == "random":
        return RandomAgent(agent_id, seed=spec.seed)
    if spec.kind == "human":
        return HumanCLIAgent(agent_id)
    raise MatchConfigurationError(f"Unsupported agent kind {spec.kind!r}.")
