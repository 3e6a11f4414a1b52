"""Base action abstraction shared by all games."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Self

from .serialize import public_fields


class Action:
    """A single move proposed against a state.

    Actions are value objects: games should declare them as frozen dataclasses
    so that handing the same instance to several states is safe. The runner
    never looks inside an action beyond comparing it with ``==`` against the
    legal set it offered.
    """

    action_type: ClassVar[str] = "Action"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable payload tagged with ``type``."""
        payload = public_fields(self)
        payload["type"] = self.action_type
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild an action from a ``to_dict`` payload."""
        kwargs = {key: value for key, value in data.items() if key not in {"type", "action_type"}}
        return cls(**kwargs)  # type: ignore[call-arg]
