"""Instance kinds — closes decoded JSON values into a fixed set of variants."""

from __future__ import annotations

from enum import Enum
from typing import Any


class InstanceKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> InstanceKind:
    """Classify a decoded JSON value.

    ``bool`` is checked before numbers since it subclasses ``int``.
    Anything that ``json.loads`` cannot produce raises ``TypeError``.
    """
    if value is None:
        return InstanceKind.NULL
    if isinstance(value, bool):
        return InstanceKind.BOOLEAN
    if isinstance(value, (int, float)):
        return InstanceKind.NUMBER
    if isinstance(value, str):
        return InstanceKind.STRING
    if isinstance(value, list):
        return InstanceKind.ARRAY
    if isinstance(value, dict):
        return InstanceKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")
