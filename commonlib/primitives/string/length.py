"""String length primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import unit_length


def execute(text) -> int:
    """Number of UTF-16 code units in text: length("😀") == 2."""
    return unit_length(as_text(text, name="length argument"))


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "length",
    ("text",),
    "integer",
    "Length of a text in UTF-16 code units",
)
