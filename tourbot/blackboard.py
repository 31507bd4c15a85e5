"""Blackboard service: shared named values of three kinds."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Any, Callable

_SERVICE_PREFIX = "/BlackboardComponent"

_MISSING_FIELD = "missing required field name"
_MISSING_VALUE = "missing required value"
_NOT_FOUND = "field not found"
_OVERWRITING = "field already present, overwriting"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class GetResponse:
    """Reply to a read: the value when found, otherwise an error message."""

    is_ok: bool
    value: Any = None
    error_msg: str = ""


@dataclass(frozen=True)
class SetResponse:
    """Reply to a write; a message may accompany success."""

    is_ok: bool
    error_msg: str = ""


class _Board:
    """One table of values guarded by its own lock."""

    def __init__(self, default: Any) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Any] = {}
        self._default = default

    def get(self, field_name: str) -> GetResponse:
        with self._lock:
            if field_name == "":
                return GetResponse(False, self._default, _MISSING_FIELD)
            if field_name not in self._values:
                return GetResponse(False, self._default, _NOT_FOUND)
            return GetResponse(True, self._values[field_name])

    def set(self, field_name: str, value: Any, value_missing: bool) -> SetResponse:
        with self._lock:
            if field_name == "":
                return SetResponse(False, _MISSING_FIELD)
            if value_missing:
                return SetResponse(False, _MISSING_VALUE)
            message = _OVERWRITING if field_name in self._values else ""
            self._values[field_name] = value
            return SetResponse(True, message)


class BlackboardComponent:
    """Stores floating-point, integer and string values by field name."""

    def __init__(self) -> None:
        self._doubles = _Board(0.0)
        self._ints = _Board(0)
        self._strings = _Board("")

    def get_double(self, field_name: str) -> GetResponse:
        """Read a floating-point field."""
        return self._doubles.get(field_name)

    def set_double(self, field_name: str, value: float) -> SetResponse:
        """Write a floating-point field; NaN counts as a missing value."""
        value = float(value)
        return self._doubles.set(field_name, value, math.isnan(value))

    def get_int(self, field_name: str) -> GetResponse:
        """Read an integer field."""
        return self._ints.get(field_name)

    def set_int(self, field_name: str, value: int) -> SetResponse:
        """Write a 32-bit integer field; zero counts as a missing value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"integer value expected, got {value!r}")
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise OverflowError(f"{value} does not fit in a 32-bit integer")
        return self._ints.set(field_name, value, value == 0)

    def get_string(self, field_name: str) -> GetResponse:
        """Read a string field."""
        return self._strings.get(field_name)

    def set_string(self, field_name: str, value: str) -> SetResponse:
        """Write a string field; the empty string counts as a missing value."""
        return self._strings.set(field_name, value, value == "")

    def services(self) -> dict[str, Callable[..., object]]:
        """Return the service handlers keyed by their service names."""
        return {
            f"{_SERVICE_PREFIX}/SetDouble": self.set_double,
            f"{_SERVICE_PREFIX}/GetDouble": self.get_double,
            f"{_SERVICE_PREFIX}/SetInt": self.set_int,
            f"{_SERVICE_PREFIX}/GetInt": self.get_int,
            f"{_SERVICE_PREFIX}/SetString": self.set_string,
            f"{_SERVICE_PREFIX}/GetString": self.get_string,
        }