"""Greater-or-equal primitive for commonlib"""

from commonlib.primitives.comparison._ordering import compare, comparison_spec


def execute(left, right):
    """True when left is greater than or equal to right"""
    return compare("greaterEqual", left, right, lambda left_value, right_value: left_value >= right_value)


KERNEL = execute
PRIMITIVE_SPEC = comparison_spec("greaterEqual", "True when left is greater than or equal to right")
