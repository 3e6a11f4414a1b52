"""Terminal results of finished games."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .color import PlayerColor
from .serialize import public_fields


class Outcome:
    """Base for game-specific outcome values.

    Not an ``ABC``: concrete games mix it into an ``Enum``.
    """

    def is_final(self) -> bool:
        """Return whether this outcome value is a true terminal condition."""
        raise NotImplementedError(f"{self.__class__.__name__} does not implement is_final().")

    def winner(self) -> PlayerColor | None:
        """Return the winning seat, or ``None`` for draws and shared losses."""
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable summary; never consults ``is_final()``."""
        payload: dict[str, Any] = {"outcome": self.__class__.__name__}
        if isinstance(self, Enum):
            payload["value"] = self.value
        else:
            payload.update(public_fields(self))
        winner = self.winner()
        payload["winner"] = winner.value if winner is not None else None
        return payload
