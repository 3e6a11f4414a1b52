"""Race-to-42 reference game."""

from .race_actions import BUMP_SIZES, Bump
from .race_game import RaceGame
from .race_state import DEFAULT_TARGET, RaceOutcome, RaceState

__all__ = [
    "BUMP_SIZES",
    "Bump",
    "DEFAULT_TARGET",
    "RaceGame",
    "RaceOutcome",
    "RaceState",
]
