"""Points of interest and the actions bound to their commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tourbot.actions import Action

_KEY_NAME = "m_name"
_KEY_ACTIONS = "m_availableActions"


@dataclass
class PoI:
    """A named point of interest mapping commands to action sequences."""

    name: str = ""
    available_actions: dict[str, list[Action]] = field(default_factory=dict)

    def is_command_valid(self, command: str) -> bool:
        """Tell whether the command is known at this point of interest."""
        return command in self.available_actions

    def get_actions(self, command: str) -> list[Action]:
        """Return the actions for a command; raise KeyError if it is unknown."""
        if not self.is_command_valid(command):
            raise KeyError(f"unknown command {command!r} for point of interest {self.name!r}")
        return list(self.available_actions[command])

    def available_commands(self) -> list[str]:
        """Return every command known at this point of interest."""
        return list(self.available_actions)

    def command_multiples_num(self, command: str) -> int:
        """Count the commands whose name contains the given text."""
        return sum(command in name for name in self.available_commands())

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of this point of interest."""
        return {
            _KEY_NAME: self.name,
            _KEY_ACTIONS: {
                command: [action.to_dict() for action in actions]
                for command, actions in self.available_actions.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PoI":
        """Build a point of interest from its JSON representation."""
        name = data[_KEY_NAME]
        if not isinstance(name, str):
            raise TypeError(f"{_KEY_NAME} must be a string, got {name!r}")
        raw_actions = data[_KEY_ACTIONS]
        if not isinstance(raw_actions, Mapping):
            raise TypeError(f"{_KEY_ACTIONS} must be an object")
        actions = {
            command: [Action.from_dict(item) for item in items]
            for command, items in raw_actions.items()
        }
        return cls(name, actions)