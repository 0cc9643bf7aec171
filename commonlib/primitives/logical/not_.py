"""Negation primitive for commonlib"""

from commonlib.primitives._coerce import as_boolean
from commonlib.primitives.api import scalar_spec


def execute(value):
    return not as_boolean(value, name="not operand")


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec("logical", "not", ("boolean",), "boolean", "Logical negation")
