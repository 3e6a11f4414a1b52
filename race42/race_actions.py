"""Actions for the race-to-42 counter game."""

from __future__ import annotations

from dataclasses import dataclass

from turnkit.action import Action

BUMP_SIZES: tuple[int, ...] = (2, 3, 4)


@dataclass(frozen=True)
class Bump(Action):
    """Add ``amount`` to the shared counter."""

    amount: int
    action_type = "Bump"

    def __post_init__(self) -> None:
        if self.amount not in BUMP_SIZES:
            raise ValueError(f"Bump.amount must be one of {BUMP_SIZES}.")
