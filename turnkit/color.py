"""Seat identities for two-player games."""

from __future__ import annotations

from enum import Enum


class PlayerColor(str, Enum):
    """The two seats of a match, ordered by declaration (BLACK < WHITE)."""

    BLACK = "BLACK"
    WHITE = "WHITE"

    def opponent(self) -> PlayerColor:
        """Return the other seat."""
        return PlayerColor.WHITE if self is PlayerColor.BLACK else PlayerColor.BLACK

    def _rank(self) -> int:
        return 0 if self is PlayerColor.BLACK else 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlayerColor):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PlayerColor):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PlayerColor):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PlayerColor):
            return NotImplemented
        return self._rank() >= other._rank()
