"""Structured exceptions raised by the runner and arena."""

from __future__ import annotations

from typing import Any

from .color import PlayerColor
from .serialize import to_serializable


class TurnkitError(Exception):
    """Base class for framework-level exceptions."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class MatchConfigurationError(TurnkitError):
    """Raised when a runner or arena is wired incorrectly."""


class NoLegalActionsError(TurnkitError):
    """Raised when an undecided state offers no legal actions."""

    def __init__(self, color: PlayerColor, state_digest: str):
        self.color = color
        self.state_digest = state_digest
        super().__init__(f"State {state_digest[:12]} has no outcome but no legal actions for {color.value}.")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"color": self.color.value, "state_digest": self.state_digest})
        return payload


class IllegalActionError(TurnkitError):
    """Raised when an agent returns an action outside the legal set it was offered."""

    def __init__(self, color: PlayerColor, action: Any, reason: str | None = None):
        self.color = color
        self.action = action
        self.reason = reason
        message = f"Illegal action by {color.value}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update({"color": self.color.value, "action": to_serializable(self.action)})
        if self.reason is not None:
            payload["reason"] = self.reason
        return payload


class AgentExecutionError(TurnkitError):
    """Raised when an agent fails to produce an action."""

    def __init__(self, color: PlayerColor | None, message: str):
        self.color = color
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["color"] = self.color.value if self.color is not None else None
        return payload


class TurnLimitExceededError(TurnkitError):
    """Raised when a match runs past ``RunnerConfig.max_turns``."""

    def __init__(self, max_turns: int):
        self.max_turns = max_turns
        super().__init__(f"Match exceeded max_turns={max_turns} without an outcome.")
