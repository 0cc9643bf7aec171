"""
Multiplication primitive for commonlib

Implements IEEE 754 multiplication for numeric types.
"""

from commonlib.primitives.api import scalar_spec
from commonlib.primitives.arithmetic._float_math import apply_binary_op


def execute(left, right):
    """
    Execute multiplication operation

    Args:
        left: Left operand (number)
        right: Right operand (number)

    Returns:
        Product of left and right
    """
    return apply_binary_op(
        "Multiplication",
        left,
        right,
        lambda left_value, right_value: left_value * right_value,
    )


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "arithmetic",
    "multiply",
    ("number", "number"),
    "number",
    "Multiplication of two numbers",
)
