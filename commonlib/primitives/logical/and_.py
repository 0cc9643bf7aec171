"""Conjunction primitive for commonlib"""

from commonlib.primitives._coerce import as_boolean
from commonlib.primitives.api import scalar_spec


def execute(left, right):
    """True only when both operands are True"""
    left_value = as_boolean(left, name="and left operand")
    right_value = as_boolean(right, name="and right operand")
    return left_value and right_value


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "logical",
    "and",
    ("boolean", "boolean"),
    "boolean",
    "Logical conjunction",
)
