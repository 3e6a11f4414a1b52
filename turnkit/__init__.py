"""Generic two-player turn-based game contracts and the runner that plays them."""

from .action import Action
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
from .events import EventType, MatchEvent
from .game import Game
from .outcome import Outcome
from .result import MatchResult
from .runner import GameRunner, MatchRun, RunnerConfig
from .state import State

__all__ = [
    "Action",
    "Agent",
    "AgentExecutionError",
    "EventType",
    "Game",
    "GameRunner",
    "IllegalActionError",
    "MatchConfigurationError",
    "MatchEvent",
    "MatchResult",
    "MatchRun",
    "NoLegalActionsError",
    "Outcome",
    "PlayerColor",
    "RunnerConfig",
    "State",
    "TurnLimitExceededError",
    "TurnkitError",
]
