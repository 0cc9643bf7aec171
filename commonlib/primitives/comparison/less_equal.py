"""Less-or-equal primitive for commonlib"""

from commonlib.primitives.comparison._ordering import compare, comparison_spec


def execute(left, right):
    """True when left is less than or equal to right"""
    return compare("lessEqual", left, right, lambda left_value, right_value: left_value <= right_value)


KERNEL = execute
PRIMITIVE_SPEC = comparison_spec("lessEqual", "True when left is less than or equal to right")
