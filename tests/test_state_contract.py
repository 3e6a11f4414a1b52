"""Contract checks that every shipped game state must satisfy."""

from __future__ import annotations

import random
from typing import Any, Callable

from race42.race_state import RaceState
from tictactoe.tictactoe_state import TicTacToeState
from turnkit.agents.random_agent import RandomAgent
from turnkit.runner import GameRunner, RunnerConfig
from turnkit.state import State

STATE_FACTORIES: dict[str, Callable[[], State[Any, Any]]] = {
    "race42": RaceState,
    "tictactoe": TicTacToeState,
}


def _random_walk(factory: Callable[[], State[Any, Any]], seed: int) -> list[State[Any, Any]]:
    rng = random.Random(seed)
    state = factory()
    visited = [state.clone()]
    while state.outcome() is None:
        state.make_next(rng.choice(list(state.legal_actions())))
        visited.append(state.clone())
    return visited


def test_next_matches_clone_then_make_next_and_leaves_receiver_alone() -> None:
    for factory in STATE_FACTORIES.values():
        for seed in range(5):
            for state in _random_walk(factory, seed):
                for action in state.legal_actions():
                    before = state.clone()
                    advanced = state.next(action)

                    expected = state.clone()
                    expected.make_next(action)

                    assert advanced == expected
                    assert advanced.state_digest() == expected.state_digest()
                    assert state == before


def test_undecided_reachable_states_always_offer_actions() -> None:
    for factory in STATE_FACTORIES.values():
        for seed in range(25):
            for state in _random_walk(factory, seed):
                if state.outcome() is None:
                    assert len(state.legal_actions()) > 0
                else:
                    assert state.is_terminal()
                    assert state.outcome().is_final()


def test_clone_is_independent_of_the_original() -> None:
    state = TicTacToeState()
    copy = state.clone()
    copy.make_next(copy.legal_actions()[4])

    assert state.board[1][1] is None
    assert copy.board[1][1] is not None


def test_race_terminates_within_its_bound() -> None:
    # Smallest bump is 2, so no race from zero can outlast 22 moves.
    for seed in range(20):
        runner = GameRunner(
            RandomAgent("black"),
            RandomAgent("white"),
            RaceState(),
            RunnerConfig(max_turns=22),
            seed=seed,
        )
        run = runner.play()
        assert 11 <= run.result.turns <= 22


def test_tictactoe_terminates_within_nine_turns() -> None:
    for seed in range(20):
        runner = GameRunner(
            RandomAgent("black"),
            RandomAgent("white"),
            TicTacToeState(),
            RunnerConfig(max_turns=9),
            seed=seed,
        )
        run = runner.play()
        assert 5 <= run.result.turns <= 9
