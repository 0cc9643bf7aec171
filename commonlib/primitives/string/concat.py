"""String concatenation primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import decode, encode


def execute(left, right) -> str:
    """Concatenate two texts.

    Joining at the code-unit level recombines a high surrogate at the end of
    `left` with a low surrogate at the start of `right`.
    """
    left_text = as_text(left, name="concat left operand")
    right_text = as_text(right, name="concat right operand")
    return decode(encode(left_text) + encode(right_text))


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "concat",
    ("text", "text"),
    "text",
    "Concatenate two texts",
)
