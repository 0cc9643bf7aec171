"""First-occurrence search primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import UNIT_SIZE, encode, find_unit


def execute(text, needle) -> int:
    """Code-unit index of the first occurrence of needle in text, or -1.

    An empty needle matches at index 0.
    """
    haystack = encode(as_text(text, name="indexOf text"))
    pattern = encode(as_text(needle, name="indexOf needle"))
    position = find_unit(haystack, pattern)
    if position == -1:
        return -1
    return position // UNIT_SIZE


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "indexOf",
    ("text", "text"),
    "integer",
    "Index of the first occurrence of a substring, -1 when absent",
)
