"""Enums shared across the verifier and the validation engine."""

from __future__ import annotations

from enum import Enum


class Form(str, Enum):
    """The eight mutually-exclusive schema forms."""

    EMPTY = "empty"
    REF = "ref"
    TYPE = "type"
    ENUM = "enum"
    ELEMENTS = "elements"
    PROPERTIES = "properties"
    VALUES = "values"
    DISCRIMINATOR = "discriminator"


class Type(str, Enum):
    """Recognized values of the ``type`` keyword."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    STRING = "string"
    TIMESTAMP = "timestamp"


TYPE_NAMES: frozenset[str] = frozenset(t.value for t in Type)

# Inclusive bounds for the sized integer types.
INTEGER_RANGES: dict[Type, tuple[int, int]] = {
    Type.INT8: (-(2**7), 2**7 - 1),
    Type.UINT8: (0, 2**8 - 1),
    Type.INT16: (-(2**15), 2**15 - 1),
    Type.UINT16: (0, 2**16 - 1),
    Type.INT32: (-(2**31), 2**31 - 1),
    Type.UINT32: (0, 2**32 - 1),
    Type.INT64: (-(2**63), 2**63 - 1),
    Type.UINT64: (0, 2**64 - 1),
}

# Types satisfied by any JSON number.
FLOAT_TYPES: frozenset[Type] = frozenset({Type.NUMBER, Type.FLOAT32, Type.FLOAT64})
