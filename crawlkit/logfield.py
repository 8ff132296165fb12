"""Typed extra fields that can be attached to log records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class FieldType(IntEnum):
    """The kind of value a log field holds."""

    UNKNOWN = 0
    BOOL = 1
    INT64 = 2
    FLOAT64 = 3
    STRING = 4
    OBJECT = 5


@dataclass(frozen=True)
class Field:
    """A named, typed value to be recorded along with a log message."""

    name: str
    type: FieldType
    value: Any


def bool_field(name: str, value: bool) -> Field:
    """Return a field holding a boolean."""
    if not isinstance(value, bool):
        raise TypeError(f"bool field {name!r} needs a bool, got {type(value).__name__}")
    return Field(name, FieldType.BOOL, value)


def int64_field(name: str, value: int) -> Field:
    """Return a field holding a signed 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"int64 field {name!r} needs an int, got {type(value).__name__}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"int64 field {name!r} out of range: {value}")
    return Field(name, FieldType.INT64, value)


def float64_field(name: str, value: float) -> Field:
    """Return a field holding a floating point number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"float64 field {name!r} needs a number, got {type(value).__name__}"
        )
    return Field(name, FieldType.FLOAT64, float(value))


def string_field(name: str, value: str) -> Field:
    """Return a field holding a string."""
    if not isinstance(value, str):
        raise TypeError(f"string field {name!r} needs a str, got {type(value).__name__}")
    return Field(name, FieldType.STRING, value)


def object_field(name: str, value: Any) -> Field:
    """Return a field holding any value."""
    return Field(name, FieldType.OBJECT, value)