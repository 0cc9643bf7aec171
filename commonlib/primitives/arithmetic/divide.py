"""
Division primitive for commonlib

Implements IEEE 754 division. Python raises ZeroDivisionError for a zero
divisor, so that case is mapped to the IEEE result explicitly.
"""

import math

from commonlib.primitives.api import scalar_spec
from commonlib.primitives.arithmetic._float_math import apply_binary_op


def _ieee_divide(dividend: float, divisor: float) -> float:
    if divisor != 0.0:
        return dividend / divisor
    if dividend == 0.0 or math.isnan(dividend):
        return math.nan
    # Sign is the product of both signs, a zero divisor included.
    return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def execute(left, right):
    """
    Execute division operation

    Args:
        left: Dividend (number)
        right: Divisor (number)

    Returns:
        Quotient of left and right; signed Infinity or NaN for a zero divisor
    """
    return apply_binary_op("Division", left, right, _ieee_divide)


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "arithmetic",
    "divide",
    ("number", "number"),
    "number",
    "Division of two numbers",
)
