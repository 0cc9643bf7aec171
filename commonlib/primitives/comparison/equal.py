"""
Equality primitive for commonlib

IEEE 754 equality: NaN equals nothing, itself included, and +0 equals -0.
"""

from commonlib.primitives.comparison._ordering import compare, comparison_spec


def execute(left, right):
    """True when left and right are the same IEEE 754 value"""
    return compare("equal", left, right, lambda left_value, right_value: left_value == right_value)


KERNEL = execute
PRIMITIVE_SPEC = comparison_spec("equal", "IEEE 754 equality of two numbers")
