"""Less-than primitive for commonlib"""

from commonlib.primitives.comparison._ordering import compare, comparison_spec


def execute(left, right):
    """True when left is strictly less than right"""
    return compare("lessThan", left, right, lambda left_value, right_value: left_value < right_value)


KERNEL = execute
PRIMITIVE_SPEC = comparison_spec("lessThan", "True when left is strictly less than right")
