"""
Runtime values of the fns language.

Values are plain Python objects:

- ``None`` for ``none``
- ``bool`` for booleans
- ``float`` for numbers
- ``str`` for strings
- ``dict[str, Value]`` for objects

Python's own ``==`` treats ``True == 1.0``, so equality between fns values
goes through ``values_equal`` which never considers different kinds equal.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, TypeAlias

Value: TypeAlias = None | bool | float | str | dict[str, Any]


def copy_value(value: Value) -> Value:
    """Return an independent copy of ``value``; objects are copied deeply."""
    if isinstance(value, dict):
        return {key: copy_value(item) for key, item in value.items()}
    return value


def kind_of(value: Value) -> str:
    """Name of the value's kind: none, boolean, number, string or object."""
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"not an fns value: {type(value).__name__}")


def values_equal(left: Value, right: Value) -> bool:
    """Structural equality; values of different kinds are never equal."""
    if kind_of(left) != kind_of(right):
        return False
    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    return left == right


def format_number(number: float) -> str:
    """Integral numbers without a fraction, others in shortest form, never exponent."""
    if number.is_integer():
        return str(int(number))
    text = repr(number)
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


def display_value(value: Value, nested: bool = False) -> str:
    """Text shown for a value by the shell and in operator diagnostics."""
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, dict):
        entries = ", ".join(f"{k}: {display_value(v, nested=True)}" for k, v in value.items())
        return "{" + entries + "}"
    raise TypeError(f"not an fns value: {type(value).__name__}")
