"""Baseline agent implementations."""

from .first_action_agent import FirstActionAgent
from .human_cli_agent import HumanCLIAgent
from .random_agent import RandomAgent
from .scripted_agent import ScriptedAgent

__all__ = [
    "FirstActionAgent",
    "HumanCLIAgent",
    "RandomAgent",
    "ScriptedAgent",
]
