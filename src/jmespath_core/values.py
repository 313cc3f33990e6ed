"""JSON value model and validators for the navigation primitives."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import jax.numpy as jnp

Value = Union[None, bool, int, float, str, list, dict]


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class ValueInfo:
    kind: ValueKind
    length: int | None
    depth: int


def is_null(value: object) -> bool:
    return value is None


def kind_of(value: object) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    # bool is an int subclass, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def depth_of(value: object) -> int:
    if isinstance(value, list):
        if not value:
            return 1
        return 1 + max(depth_of(item) for item in value)
    if isinstance(value, dict):
        if not value:
            return 1
        return 1 + max(depth_of(item) for item in value.values())
    return 0


def value_info(value: object) -> ValueInfo:
    kind = kind_of(value)
    length = len(value) if isinstance(value, (str, list, dict)) else None
    return ValueInfo(kind=kind, length=length, depth=depth_of(value))


def is_truthy(value: object) -> bool:
    """JMESPath truthiness: null, false and empty string/array/object are false."""
    if value is None or value is False:
        return False
    if isinstance(value, (str, list, dict)):
        return len(value) > 0
    return True


def values_equal(left: object, right: object) -> bool:
    """Structural JSON equality; booleans never compare equal to numbers."""
    if kind_of(left) is not kind_of(right):
        return False
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(values_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(values_equal(item, right[key]) for key, item in left.items())
    return left == right


def validate_value(value: object, *, where: str = "value") -> None:
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for idx, item in enumerate(value):
            validate_value(item, where=f"{where}[{idx}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{where} has non-string key {key!r}")
            validate_value(item, where=f"{where}[{key!r}]")
        return
    raise TypeError(f"{where} has unsupported runtime type {type(value).__name__}")


def to_value(obj: Any, *, where: str = "value") -> Value:
    """Normalise host data into the JSON value model.

    Tuples become arrays, mappings become objects, JAX and NumPy arrays are
    expanded through ``tolist()``, which also turns NumPy and JAX scalars
    into Python scalars.
    """
    if obj is None or isinstance(obj, (bool, str)):
        return obj
    if isinstance(obj, jnp.ndarray) or (hasattr(obj, "tolist") and hasattr(obj, "ndim")):
        return to_value(obj.tolist(), where=where)
    if isinstance(obj, (int, float)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [to_value(item, where=f"{where}[{idx}]") for idx, item in enumerate(obj)]
    if isinstance(obj, Mapping):
        out: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"{where} has non-string key {key!r}")
            out[key] = to_value(item, where=f"{where}[{key!r}]")
        return out
    raise TypeError(f"{where} has unsupported runtime type {type(obj).__name__}")


def detach(value: Value) -> Value:
    if isinstance(value, (list, dict)):
        return copy.deepcopy(value)
    return value
