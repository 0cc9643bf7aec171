"""
Addition primitive for commonlib

Implements IEEE 754 addition for numeric types.
"""

from commonlib.primitives.api import scalar_spec
from commonlib.primitives.arithmetic._float_math import apply_binary_op


def execute(left, right):
    """
    Execute addition operation

    Args:
        left: Left operand (number)
        right: Right operand (number)

    Returns:
        Sum of left and right
    """
    return apply_binary_op(
        "Addition",
        left,
        right,
        lambda left_value, right_value: left_value + right_value,
    )


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "arithmetic",
    "add",
    ("number", "number"),
    "number",
    "Addition of two numbers",
)
