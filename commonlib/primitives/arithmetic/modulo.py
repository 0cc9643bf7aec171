"""
Modulo primitive for commonlib

Truncated remainder: the result takes the sign of the dividend, so
modulo(-10, 3) is -1, unlike Python's floored `%` which gives 2.
"""

import math

from commonlib.primitives.api import scalar_spec
from commonlib.primitives.arithmetic._float_math import apply_binary_op


def _truncated_remainder(dividend: float, divisor: float) -> float:
    # math.fmod raises ValueError where IEEE 754 remainder is NaN.
    if divisor == 0.0 or math.isinf(dividend):
        return math.nan
    return math.fmod(dividend, divisor)


def execute(left, right):
    """
    Execute modulo operation

    Args:
        left: Dividend (number)
        right: Divisor (number)

    Returns:
        Remainder of the truncated division of left by right; NaN when right is zero
    """
    return apply_binary_op("Modulo", left, right, _truncated_remainder)


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "arithmetic",
    "modulo",
    ("number", "number"),
    "number",
    "Truncated remainder of two numbers",
)
