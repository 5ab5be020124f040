"""
ValueKind -- explicit runtime type tag.

Diagnostics describe operands by kind instead of by introspected class
name, so messages stay stable across implementations of the same value
(a ``dict`` and an ``OrderedDict`` are both MAPPING).
"""

from __future__ import annotations

import types
from collections.abc import Mapping, Sequence, Set
from enum import Enum, unique
from typing import Any

# Kinds that are scalar values or code rather than objects with state.
_NON_OBJECT_KINDS: frozenset[str] = frozenset(
    {"null", "bool", "int", "float", "function"}
)


@unique
class ValueKind(str, Enum):
    """Coarse classification of a runtime value."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    FUNCTION = "function"
    TYPE = "type"
    OBJECT = "object"

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        """Classify ``value``. Order matters: bool is an int subclass."""
        if value is None:
            return cls.NULL
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, (float, complex)):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.BYTES
        if isinstance(value, type):
            return cls.TYPE
        if isinstance(
            value,
            (
                types.FunctionType,
                types.BuiltinFunctionType,
                types.MethodType,
            ),
        ):
            return cls.FUNCTION
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, Set):
            return cls.SET
        if isinstance(value, Sequence):
            return cls.SEQUENCE
        return cls.OBJECT

    @property
    def is_object(self) -> bool:
        """True for values that carry fields: strings, containers, types, instances."""
        return self.value not in _NON_OBJECT_KINDS


def type_label(type_: Any) -> str:
    """Label for an expected type (or tuple of types) in a message."""
    if isinstance(type_, tuple):
        return " | ".join(type_label(t) for t in type_)
    return getattr(type_, "__qualname__", None) or str(type_)
