"""Argument domain checks shared by every primitive namespace."""

from __future__ import annotations

from typing import Any
import math

from commonlib.error_msg import PrimitiveTypeError
from commonlib.primitives.api import accepts


def _reject(value: Any, *, name: str, expected: str) -> PrimitiveTypeError:
    return PrimitiveTypeError(
        f"{name} must be {expected}, got {type(value).__name__}: {value!r}"
    )


def as_number(value: Any, *, name: str) -> float:
    """Convert an int or float argument to float; bool is not a number.

    An int beyond the double range rounds to the signed infinity, the IEEE 754
    round-to-nearest result, where `float()` would raise OverflowError.
    """
    if not accepts(value, "number"):
        raise _reject(value, name=name, expected="a number")
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def as_boolean(value: Any, *, name: str) -> bool:
    if not accepts(value, "boolean"):
        raise _reject(value, name=name, expected="a boolean")
    return value


def as_integer(value: Any, *, name: str) -> int:
    """Accept ints and integral floats, the way numeric literals arrive from scripts."""
    if not accepts(value, "integer"):
        raise _reject(value, name=name, expected="an integer")
    return int(value)


def as_text(value: Any, *, name: str) -> str:
    if not accepts(value, "text"):
        raise _reject(value, name=name, expected="text")
    return value


def as_text_array(value: Any, *, name: str) -> list[str]:
    if not accepts(value, "text_array"):
        raise _reject(value, name=name, expected="an array of text")
    return list(value)
