"""Normalization of Python values into the Jot value model."""

import dataclasses
import math
from collections.abc import Mapping
from typing import Any

from .errors import JotEncodeError
from .types import JsonValue


def normalize_value(value: Any) -> JsonValue:
    """Convert a Python value into plain JSON-compatible containers.

    Mappings become dicts (order preserved), lists and tuples become lists,
    dataclass instances and pydantic models become dicts of their fields.
    The input is never mutated.

    Args:
        value: Value to normalize

    Returns:
        Normalized value

    Raises:
        JotEncodeError: If the value holds a non-finite float, a non-string
            mapping key or a type with no Jot representation
    """
    if value is None or isinstance(value, (bool, str)):
        return value

    if isinstance(value, int):
        return int(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise JotEncodeError(f"Cannot encode non-finite number: {value!r}")
        return value

    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise JotEncodeError(f"Object keys must be strings, got {type(key).__name__}: {key!r}")
            result[key] = normalize_value(item)
        return result

    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return normalize_value({f.name: getattr(value, f.name) for f in dataclasses.fields(value)})

    # pydantic v2 / v1 models
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump):
        return normalize_value(model_dump())
    if hasattr(value, "__fields__") and callable(getattr(value, "dict", None)):
        return normalize_value(value.dict())

    raise JotEncodeError(f"Cannot encode value of type {type(value).__name__}")


def is_json_primitive(value: Any) -> bool:
    """Check if value is a scalar (null, boolean, number or string)."""
    return value is None or isinstance(value, (str, int, float, bool))


def is_json_array(value: Any) -> bool:
    """Check if value is an array."""
    return isinstance(value, list)


def is_json_object(value: Any) -> bool:
    """Check if value is an object."""
    return isinstance(value, dict)


def is_complex(value: Any) -> bool:
    """Check if value is a container (object or array)."""
    return isinstance(value, (dict, list))
