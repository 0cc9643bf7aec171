"""Inequality primitive for commonlib"""

from commonlib.primitives.comparison import equal
from commonlib.primitives.comparison._ordering import comparison_spec


def execute(left, right):
    """Negation of equal for every input, so notEqual(NaN, NaN) is True"""
    return not equal.execute(left, right)


KERNEL = execute
PRIMITIVE_SPEC = comparison_spec("notEqual", "Negation of IEEE 754 equality")
