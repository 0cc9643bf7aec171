"""Helpers to lift float binary operations over the Number domain."""

from __future__ import annotations

from typing import Any, Callable

from commonlib.primitives._coerce import as_number


FloatBinaryOp = Callable[[float, float], float]


def apply_binary_op(name: str, left: Any, right: Any, op: FloatBinaryOp) -> float:
    """Apply op to both operands after converting them to IEEE 754 doubles."""
    left_value = as_number(left, name=f"{name} left operand")
    right_value = as_number(right, name=f"{name} right operand")
    return op(left_value, right_value)
