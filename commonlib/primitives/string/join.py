"""Separator join primitive."""

from __future__ import annotations

from commonlib.primitives._coerce import as_text, as_text_array
from commonlib.primitives.api import scalar_spec
from commonlib.primitives.string._code_units import decode, encode


def execute(items, separator) -> str:
    """Concatenate items with separator between consecutive elements.

    `join(split(s, d), d) == s` for any delimiter d, since adjacent surrogate
    halves produced by an empty-delimiter split are recombined here.
    """
    parts = as_text_array(items, name="join items")
    glue = as_text(separator, name="join separator")
    return decode(encode(glue).join(encode(part) for part in parts))


KERNEL = execute
PRIMITIVE_SPEC = scalar_spec(
    "string",
    "join",
    ("text_array", "text"),
    "text",
    "Join an array of texts with a separator",
)
