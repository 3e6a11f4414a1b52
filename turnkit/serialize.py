"""Canonical JSON for states, actions and events.

Two equal game values must always encode to the same text, since state
digests are compared across runs. Mappings are emitted with sorted keys and
sets are ordered by their own canonical encoding.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

_PRIMITIVES = (bool, int, float, str)


def public_fields(value: Any) -> dict[str, Any]:
    """Return the public attributes of a dataclass or plain object, serialized."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [field.name for field in dataclasses.fields(value)]
    else:
        names = list(vars(value))
    return {name: to_serializable(getattr(value, name)) for name in names if not name.startswith("_")}


def to_serializable(value: Any) -> Any:
    """Reduce a value to JSON primitives (dict, list, str, number, bool, None).

    Enum members collapse to their value, so a ``PlayerColor`` becomes
    ``"BLACK"`` and an enum-backed outcome becomes its member value.
    """
    if value is None or isinstance(value, _PRIMITIVES) and not isinstance(value, Enum):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return value.as_posix()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return public_fields(value)
    if isinstance(value, Mapping):
        return {str(to_serializable(key)): to_serializable(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(map(to_serializable, value), key=canonical_json)
    if isinstance(value, (list, tuple)):
        return list(map(to_serializable, value))
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_serializable(to_dict())
    raise TypeError(f"Cannot encode {type(value).__name__} as JSON.")


def canonical_json(value: Any, *, indent: int | None = None) -> str:
    """Encode ``value`` as sorted-key JSON; compact unless ``indent`` is given."""
    return json.dumps(
        to_serializable(value),
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":") if indent is None else None,
        indent=indent,
    )


def digest(value: Any) -> str:
    """SHA-256 hex of ``canonical_json(value)``."""
    return hashlib.sha256(canonical_json(value).encode("utf-8")).hexdigest()
