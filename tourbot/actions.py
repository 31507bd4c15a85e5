"""Actions that the robot can perform at a point of interest."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping


class ActionType(enum.Enum):
    """Kinds of action a point of interest can trigger."""

    SPEAK = 0
    DANCE = 1
    SIGNAL = 2
    INVALID = -1


_TYPE_TO_JSON: dict[ActionType, Any] = {
    ActionType.INVALID: None,
    ActionType.SPEAK: "speak",
    ActionType.DANCE: "dance",
    ActionType.SIGNAL: "signal",
}
_JSON_TO_TYPE: dict[Any, ActionType] = {value: key for key, value in _TYPE_TO_JSON.items()}

_KEY_TYPE = "m_type"
_KEY_BLOCKING = "m_isBlocking"
_KEY_PARAM = "m_param"


def _type_from_json(value: Any) -> ActionType:
    """Map a JSON value to an action type; unknown values are INVALID."""
    try:
        return _JSON_TO_TYPE.get(value, ActionType.INVALID)
    except TypeError:
        return ActionType.INVALID


@dataclass
class Action:
    """A single action with its type, blocking flag and parameter."""

    type: ActionType = ActionType.INVALID
    is_blocking: bool = True
    param: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of this action."""
        return {
            _KEY_TYPE: _TYPE_TO_JSON[self.type],
            _KEY_BLOCKING: self.is_blocking,
            _KEY_PARAM: self.param,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Action":
        """Build an action from its JSON representation."""
        action_type = _type_from_json(data[_KEY_TYPE])
        is_blocking = data[_KEY_BLOCKING]
        param = data[_KEY_PARAM]
        if not isinstance(is_blocking, bool):
            raise TypeError(f"{_KEY_BLOCKING} must be a boolean, got {is_blocking!r}")
        if not isinstance(param, str):
            raise TypeError(f"{_KEY_PARAM} must be a string, got {param!r}")
        return cls(action_type, is_blocking, param)