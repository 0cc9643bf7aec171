"""Greater-than primitive for commonlib"""

from commonlib.primitives.comparison._ordering import compare, comparison_spec


def execute(left, right):
    """True when left is strictly greater than right"""
    return compare("greaterThan", left, right, lambda left_value, right_value: left_value > right_value)


KERNEL = execute
PRIMITIVE_SPEC = comparison_spec("greaterThan", "True when left is strictly greater than right")
