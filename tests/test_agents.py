"""Unit tests for the baseline agents and seat colors."""

from __future__ import annotations

import pytest

from race42.race_actions import Bump
from race42.race_state import RaceState
from turnkit.agents.first_action_agent import FirstActionAgent
from turnkit.agents.human_cli_agent import HumanCLIAgent
from turnkit.agents.random_agent import RandomAgent
from turnkit.agents.scripted_agent import ScriptedAgent
from turnkit.color import PlayerColor
from turnkit.errors import AgentExecutionError, MatchConfigurationError

ACTIONS = [Bump(2), Bump(3), Bump(4)]


def _picks(agent: RandomAgent, color: PlayerColor, seed: int, count: int = 20) -> list[Bump]:
    agent.reset(color, seed)
    return [agent.pick_action(RaceState(), ACTIONS) for _ in range(count)]


def test_colors_are_ordered_and_opposed() -> None:
    assert PlayerColor.BLACK < PlayerColor.WHITE
    assert max(PlayerColor.WHITE, PlayerColor.BLACK) is PlayerColor.WHITE
    assert PlayerColor.BLACK.opponent() is PlayerColor.WHITE
    assert PlayerColor.WHITE.opponent() is PlayerColor.BLACK
    assert len(PlayerColor) == 2


def test_random_agent_is_reproducible_per_match_and_seat() -> None:
    agent = RandomAgent("random")

    first = _picks(agent, PlayerColor.BLACK, seed=5)
    again = _picks(agent, PlayerColor.BLACK, seed=5)

    assert first == again
    assert all(action in ACTIONS for action in first)


def test_random_agent_pinned_seed_ignores_match_seed() -> None:
    agent = RandomAgent("pinned", seed=99)

    assert _picks(agent, PlayerColor.BLACK, seed=1) == _picks(agent, PlayerColor.WHITE, seed=2)


def test_random_agent_rejects_empty_action_list() -> None:
    with pytest.raises(AgentExecutionError):
        RandomAgent("random").pick_action(RaceState(), [])


def test_first_action_agent_takes_the_head_of_the_list() -> None:
    agent = FirstActionAgent("first")

    assert agent.pick_action(RaceState(), ACTIONS) == Bump(2)
    with pytest.raises(AgentExecutionError):
        agent.pick_action(RaceState(), [])


def test_scripted_agent_follows_its_policy() -> None:
    agent = ScriptedAgent("last", policy=lambda state, actions: actions[-1])

    assert agent.pick_action(RaceState(), ACTIONS) == Bump(4)


def test_scripted_agent_needs_exactly_one_source() -> None:
    with pytest.raises(MatchConfigurationError):
        ScriptedAgent("empty")
    with pytest.raises(MatchConfigurationError):
        ScriptedAgent("both", policy=lambda state, actions: actions[0], script=[Bump(2)])


def test_scripted_agent_replays_its_script_after_reset() -> None:
    agent = ScriptedAgent("replay", script=[Bump(4), Bump(3)])
    agent.reset(PlayerColor.BLACK, 0)

    assert [agent.pick_action(RaceState(), ACTIONS) for _ in range(2)] == [Bump(4), Bump(3)]
    with pytest.raises(AgentExecutionError, match="ran out"):
        agent.pick_action(RaceState(), ACTIONS)

    agent.reset(PlayerColor.WHITE, 1)
    assert agent.pick_action(RaceState(), ACTIONS) == Bump(4)



def test_human_cli_agent_reprompts_until_a_valid_index() -> None:
    replies = iter(["two", "7", "1"])
    printed: list[str] = []
    agent = HumanCLIAgent("human", input_fn=lambda prompt: next(replies), output_fn=printed.append)
    agent.reset(PlayerColor.WHITE, seed=0)

    action = agent.pick_action(RaceState(count=10), ACTIONS)

    assert action == Bump(3)
    assert "\n=== WHITE to move ===" in printed
    assert "Expected an integer index." in printed
    assert "Index out of range." in printed
    assert '[0] {"amount":2,"type":"Bump"}' in printed
