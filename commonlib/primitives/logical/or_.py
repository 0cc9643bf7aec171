"""Disjunction primitive for commonlib"""

from commonlib.primitives._coerce import as_boolean
from commonlib.primitives.api import scalar_spec


def execute(left, right):
    """True when at least one operand is True"""
    left_value = as_boolean(left, name="or left operand")
    right_value = as_boolean(right, name="or right operand")
    return left_value or right_value


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "logical",
    "or",
    ("boolean", "boolean"),
    "boolean",
    "Logical disjunction",
)
